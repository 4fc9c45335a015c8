from .api import ReviewClient, ReviewRequestFailed
from .state import LANGUAGES, HISTORY_LIMIT, ReviewSession, severity_class

__all__ = [
    "ReviewClient",
    "ReviewRequestFailed",
    "LANGUAGES",
    "HISTORY_LIMIT",
    "ReviewSession",
    "severity_class",
]
