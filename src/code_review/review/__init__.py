from .parser import extract_json_span, parse_review_payload
from .prompts import build_review_prompt
from .engine import ReviewEngine

__all__ = ["extract_json_span", "parse_review_payload", "build_review_prompt", "ReviewEngine"]
