# tests/unit/test_providers_base.py
import pytest
from code_review.providers.base import LLMProvider


class EchoProvider(LLMProvider):
    async def complete(self, prompt: str) -> str:
        return prompt


@pytest.mark.unit
def test_provider_is_abstract():
    with pytest.raises(TypeError):
        LLMProvider()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_concrete_provider_returns_text():
    assert await EchoProvider().complete("hi") == "hi"
