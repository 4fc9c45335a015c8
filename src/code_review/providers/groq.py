# src/code_review/providers/groq.py
import logging
from openai import AsyncOpenAI
from .base import LLMProvider


logger = logging.getLogger(__name__)


class GroqProvider(LLMProvider):
    BASE_URL = "https://api.groq.com/openai/v1"
    DEFAULT_MODEL = "mixtral-8x7b-32768"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = BASE_URL,
        temperature: float = 0.5,
        max_tokens: int = 2048,
        timeout: float | None = None,
    ):
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        client_kwargs = {"api_key": api_key, "base_url": base_url}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        self.client = AsyncOpenAI(**client_kwargs)

    async def complete(self, prompt: str) -> str:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        if not response.choices:
            logger.warning(f"Groq returned no choices: {response}")
            return ""

        text = response.choices[0].message.content or ""
        logger.info(f"Groq response length: {len(text)} chars")
        return text
