# src/code_review/client/api.py
import logging
import httpx
from pydantic import ValidationError

from code_review.models.review import ReviewResult


logger = logging.getLogger(__name__)


class ReviewRequestFailed(Exception):
    """The review endpoint could not be reached or did not return a review."""


class ReviewClient:
    def __init__(self, api_url: str, timeout: float = 120.0):
        self.api_url = api_url
        self.timeout = timeout

    def review(self, code: str, language: str) -> ReviewResult:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.post(
                    self.api_url,
                    json={"code": code, "language": language},
                )
                response.raise_for_status()
            return ReviewResult.model_validate(response.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            logger.warning(f"Review request failed: {e}")
            raise ReviewRequestFailed("Review failed") from e
