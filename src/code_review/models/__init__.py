from .review import (
    ComplexityReport,
    HistoryEntry,
    PerformanceReport,
    ReviewRequest,
    ReviewResult,
)

__all__ = [
    "ComplexityReport",
    "HistoryEntry",
    "PerformanceReport",
    "ReviewRequest",
    "ReviewResult",
]
