# src/code_review/client/state.py
from dataclasses import dataclass, field
from datetime import datetime

from code_review.models.review import HistoryEntry, ReviewResult
from .api import ReviewClient, ReviewRequestFailed


HISTORY_LIMIT = 5

EMPTY_CODE_MESSAGE = "Please enter some code to review"
FAILURE_MESSAGE = "Failed to analyze code. Please try again."

LANGUAGES = {
    "javascript": "JavaScript/TypeScript",
    "python": "Python",
    "java": "Java",
    "cpp": "C++",
    "ruby": "Ruby",
    "go": "Go",
}


def severity_class(score: float) -> str:
    """Map a 0-10 score to the metric card class."""
    if score >= 8:
        return "good"
    if score >= 6:
        return "warning"
    return "bad"


@dataclass
class ReviewSession:
    """Input, request and history state of one reviewer page."""

    code: str = ""
    language: str = "javascript"
    loading: bool = False
    error: str = ""
    review: ReviewResult | None = None
    history: list[HistoryEntry] = field(default_factory=list)

    def submit(self, client: ReviewClient) -> None:
        if not self.code.strip():
            self.error = EMPTY_CODE_MESSAGE
            return

        self.loading = True
        self.error = ""
        code = self.code

        try:
            review = client.review(code=code, language=self.language)
            self.review = review
            entry = HistoryEntry(timestamp=datetime.now(), code=code, review=review)
            self.history = [entry, *self.history][:HISTORY_LIMIT]
        except ReviewRequestFailed:
            self.error = FAILURE_MESSAGE
        finally:
            self.loading = False

    def load_history(self, index: int) -> None:
        """Restore code and review from ``history[index]``; the index must exist."""
        entry = self.history[index]
        self.code = entry.code
        self.review = entry.review
