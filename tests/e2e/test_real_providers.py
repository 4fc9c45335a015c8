# tests/e2e/test_real_providers.py
"""
End-to-end tests for the Groq provider with real API calls.

These tests require valid API credentials set in environment variables:
- GROQ_API_KEY: Groq API key
- GROQ_MODEL: optional model override (a model currently served by Groq)

Run with: pytest tests/e2e/ -m e2e -v
"""
import os
import pytest
from code_review.providers.groq import GroqProvider
from code_review.review.engine import ReviewEngine


SIMPLE_CODE = "def add(a, b):\n    return a + b"


@pytest.mark.e2e
@pytest.mark.asyncio
async def test_groq_real_review():
    """Test Groq provider with real API call."""
    api_key = os.environ.get("GROQ_API_KEY")
    if not api_key:
        pytest.skip("GROQ_API_KEY not set")

    provider = GroqProvider(
        api_key=api_key,
        model=os.environ.get("GROQ_MODEL", GroqProvider.DEFAULT_MODEL),
    )
    result = await ReviewEngine(provider=provider).review(code=SIMPLE_CODE, language="python")

    assert isinstance(result, dict)
    assert "score" in result
    print(f"\nGroq score: {result['score']}")
    print(f"Groq suggestions: {len(result.get('suggestions', []))}")
