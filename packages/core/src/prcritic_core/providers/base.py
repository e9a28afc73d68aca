"""Base reviewer implementing the Template Method pattern.

All providers share the same review algorithm:
    review() → build_prompt()
             → _call_api()        ← only this differs per provider
             → _extract_text()

Subclasses implement two things only:
  - __init__: validate and store the SDK client
  - _call_api: make one raw API call and normalize it into a ModelResponse

The response state machine lives in _extract_text so every provider degrades
the same way when the model returns something unexpected.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from prcritic_core.errors import ReviewServiceError

logger = logging.getLogger(__name__)

TRUNCATED_REVIEW_MESSAGE = (
    "Code review completed but response was truncated due to length. "
    "The code appears to have multiple issues that need attention."
)
FALLBACK_REVIEW_MESSAGE = "Code review completed. Please check the code for potential issues."

_MAX_OUTPUT_TOKENS = 1000
_TEMPERATURE = 0.3


@dataclass
class Candidate:
    text: str | None = None
    truncated: bool = False


@dataclass
class ModelResponse:
    """Provider-neutral view of a completion: zero or more candidates."""

    candidates: list[Candidate] = field(default_factory=list)


class BaseReviewer(ABC):
    MODEL: str = ""
    MAX_OUTPUT_TOKENS: int = _MAX_OUTPUT_TOKENS
    TEMPERATURE: float = _TEMPERATURE

    def __init__(
        self,
        model: str | None = None,
        max_output_tokens: int | None = None,
        temperature: float | None = None,
    ):
        self.model = model or self.MODEL
        self.max_output_tokens = max_output_tokens if max_output_tokens is not None else self.MAX_OUTPUT_TOKENS
        self.temperature = temperature if temperature is not None else self.TEMPERATURE

    # ------------------------------------------------------------------ #
    # Public interface                                                     #
    # ------------------------------------------------------------------ #

    def review(self, file_name: str, diff_patch: str, file_content: str | None) -> str:
        """Review one file and return the model's critique as text.

        Raises ReviewServiceError when the service fails or returns no
        candidate. Every other oddity in the response maps to a fixed
        message so the caller always has something to publish.
        """
        prompt = self.build_prompt(file_name, diff_patch, file_content)
        try:
            response = self._call_api(prompt)
        except ReviewServiceError:
            raise
        except Exception as e:
            raise ReviewServiceError(f"{self.__class__.__name__} API error: {e}") from e
        return self._extract_text(response)

    # ------------------------------------------------------------------ #
    # Abstract: implement in each provider                                #
    # ------------------------------------------------------------------ #

    @abstractmethod
    def _call_api(self, prompt: str) -> ModelResponse:
        """Make a single API call and return the normalized response.

        Called exactly once per review; there are no retries.
        """

    # ------------------------------------------------------------------ #
    # Shared implementations                                               #
    # ------------------------------------------------------------------ #

    def build_prompt(self, file_name: str, diff_patch: str, file_content: str | None) -> str:
        if file_content:
            content_section = f"Full file:\n```\n{file_content}\n```"
        else:
            content_section = "Full content not available"

        return f"""Review this code and provide specific line-by-line feedback:

File: {file_name}
Changes:
```
{diff_patch}
```

{content_section}

Provide feedback in this format:
- Line X: [Issue description and suggestion]
- Line Y: [Another issue and how to fix it]

Focus on: security issues, bugs, performance problems, best practices. If no issues, say "Looks good!\""""

    def _extract_text(self, response: ModelResponse) -> str:
        if not response.candidates:
            raise ReviewServiceError(f"No candidates in {self.__class__.__name__} response")

        candidate = response.candidates[0]
        if candidate.truncated:
            logger.warning("%s response truncated at %d tokens", self.__class__.__name__, self.max_output_tokens)
            return TRUNCATED_REVIEW_MESSAGE
        if candidate.text:
            return candidate.text

        logger.warning("%s candidate had no text; using fallback review", self.__class__.__name__)
        return FALLBACK_REVIEW_MESSAGE
