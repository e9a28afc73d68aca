from __future__ import annotations

from google import genai
from google.genai import types

from prcritic_core.providers.base import BaseReviewer, Candidate, ModelResponse


class GeminiReviewer(BaseReviewer):
    MODEL = "gemini-2.0-flash"

    def __init__(self, api_key: str, **kwargs):
        super().__init__(**kwargs)
        self.client = genai.Client(api_key=api_key)

    def _call_api(self, prompt: str) -> ModelResponse:
        response = self.client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                max_output_tokens=self.max_output_tokens,
                temperature=self.temperature,
            ),
        )
        return ModelResponse(candidates=[_to_candidate(c) for c in response.candidates or []])


def _to_candidate(candidate) -> Candidate:
    truncated = candidate.finish_reason == types.FinishReason.MAX_TOKENS
    content = getattr(candidate, "content", None)
    parts = getattr(content, "parts", None) or []
    text = getattr(parts[0], "text", None) if parts else None
    return Candidate(text=text, truncated=truncated)
