# src/code_review/main.py
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from code_review import __version__
from code_review.config import get_settings
from code_review.errors import InvalidReviewRequest, ReviewError, ReviewProcessingError
from code_review.models.review import ReviewRequest
from code_review.providers.base import LLMProvider
from code_review.providers.groq import GroqProvider
from code_review.review.engine import ReviewEngine


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

REVIEW_PATH = "/api/review"


@lru_cache
def get_provider() -> LLMProvider | None:
    """Build the LLM provider once per process from settings."""
    settings = get_settings()
    if not settings.groq_api_key:
        return None
    return GroqProvider(
        api_key=settings.groq_api_key,
        model=settings.groq_model,
        base_url=settings.groq_base_url,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        timeout=settings.request_timeout,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.getLogger().setLevel(get_settings().log_level.upper())
    logger.info("AI Code Reviewer starting...")
    yield
    logger.info("AI Code Reviewer shutting down...")


app = FastAPI(title="AI Code Reviewer", lifespan=lifespan)


@app.exception_handler(ReviewError)
async def review_error_handler(request: Request, exc: ReviewError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    if request.url.path == REVIEW_PATH:
        if any(error["type"] == "json_invalid" for error in exc.errors()):
            logger.error(f"Error processing code review: request body is not JSON ({exc.errors()})")
            return await review_error_handler(request, ReviewProcessingError())
        return await review_error_handler(request, InvalidReviewRequest())
    return await request_validation_exception_handler(request, exc)


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


@app.post(REVIEW_PATH)
async def review_code(request: ReviewRequest):
    """Review a code snippet and return the model's JSON review verbatim."""
    if not request.code or not request.language:
        raise InvalidReviewRequest()

    try:
        provider = get_provider()
        if not provider:
            raise RuntimeError("No LLM provider configured (GROQ_API_KEY is not set)")

        engine = ReviewEngine(provider=provider)
        return await engine.review(code=request.code, language=request.language)

    except ReviewError:
        raise
    except Exception as e:
        logger.exception(f"Error processing code review: {e}")
        raise ReviewProcessingError() from e


def run():
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "code_review.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
