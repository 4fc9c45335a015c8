import logging
from typing import Any

from code_review.providers.base import LLMProvider
from .parser import parse_review_payload
from .prompts import build_review_prompt


logger = logging.getLogger(__name__)


class ReviewEngine:
    def __init__(self, provider: LLMProvider):
        self.provider = provider

    async def review(self, code: str, language: str) -> dict[str, Any]:
        """Run an AI review of ``code`` and return the model's JSON verbatim."""
        prompt = build_review_prompt(code=code, language=language)
        logger.info(f"Requesting {language} review ({len(code)} chars of code)")

        text = await self.provider.complete(prompt)
        return parse_review_payload(text)
