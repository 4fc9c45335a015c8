# src/code_review/errors.py


class ReviewError(Exception):
    """Failure that is reported to the caller as ``{"error": message}``."""

    status_code = 500
    message = "Failed to process code review."

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidReviewRequest(ReviewError):
    status_code = 400
    message = "Code or language not provided"


class InvalidJSONError(ReviewError):
    message = "Extracted JSON is invalid. Please check the response."


class NoJSONFoundError(ReviewError):
    message = "No valid JSON found in the Groq API response."


class ReviewProcessingError(ReviewError):
    pass
