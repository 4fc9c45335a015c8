# src/code_review/providers/__init__.py
from .base import LLMProvider
from .groq import GroqProvider

__all__ = ["LLMProvider", "GroqProvider"]
