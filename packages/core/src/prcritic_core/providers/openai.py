from __future__ import annotations

try:
    from openai import OpenAI as _OpenAI
except ImportError:
    _OpenAI = None  # type: ignore[assignment,misc]

from prcritic_core.providers.base import BaseReviewer, Candidate, ModelResponse


class OpenAIReviewer(BaseReviewer):
    MODEL = "gpt-4o"

    def __init__(self, api_key: str, **kwargs):
        if _OpenAI is None:
            raise ImportError(
                "The 'openai' package is required for this provider. " "Install it with: pip install 'prcritic[openai]'"
            )
        super().__init__(**kwargs)
        self.client = _OpenAI(api_key=api_key)

    def _call_api(self, prompt: str) -> ModelResponse:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
            max_tokens=self.max_output_tokens,
        )
        return ModelResponse(
            candidates=[
                Candidate(text=choice.message.content, truncated=choice.finish_reason == "length")
                for choice in response.choices or []
            ]
        )
