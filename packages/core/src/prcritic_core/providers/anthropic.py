from __future__ import annotations

from prcritic_core.providers.base import BaseReviewer, Candidate, ModelResponse


class AnthropicReviewer(BaseReviewer):
    MODEL = "claude-sonnet-4-20250514"

    def __init__(self, api_key: str, **kwargs):
        try:
            from anthropic import Anthropic
        except ImportError:
            raise ImportError(
                "The 'anthropic' package is required for this provider. "
                "Install it with: pip install 'prcritic[anthropic]'"
            )
        super().__init__(**kwargs)
        self.client = Anthropic(api_key=api_key)

    def _call_api(self, prompt: str) -> ModelResponse:
        # Imported inside the method because the anthropic package is optional;
        # __init__ already validated it is installed before we reach here.
        from anthropic.types import TextBlock

        response = self.client.messages.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
            max_tokens=self.max_output_tokens,
        )
        text_blocks = [block.text for block in response.content if isinstance(block, TextBlock)]
        text = "".join(text_blocks).strip() or None
        return ModelResponse(candidates=[Candidate(text=text, truncated=response.stop_reason == "max_tokens")])
