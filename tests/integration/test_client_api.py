# tests/integration/test_client_api.py
import json
import httpx
import pytest
from code_review.client.api import ReviewClient, ReviewRequestFailed


API_URL = "http://reviewer.test/api/review"

REVIEW_JSON = {
    "score": 8,
    "suggestions": ["Extract a helper"],
    "security": ["Validate user input"],
    "bestPractices": "Prefer const",
    "complexity": {"score": 6, "details": "Two nested loops"},
    "performance": {"score": 9, "suggestions": []},
}


def test_review_posts_code_and_language(httpx_mock):
    httpx_mock.add_response(url=API_URL, method="POST", json=REVIEW_JSON)

    result = ReviewClient(api_url=API_URL).review(code="let x = 1;", language="javascript")

    assert result.score == 8
    assert result.best_practices == "Prefer const"
    assert result.complexity.details == "Two nested loops"

    request = httpx_mock.get_request()
    assert json.loads(request.content) == {"code": "let x = 1;", "language": "javascript"}


@pytest.mark.parametrize("status_code", [400, 500, 503])
def test_review_non_success_status(httpx_mock, status_code):
    httpx_mock.add_response(url=API_URL, status_code=status_code, json={"error": "Failed to process code review."})

    with pytest.raises(ReviewRequestFailed):
        ReviewClient(api_url=API_URL).review(code="x", language="python")


def test_review_network_error(httpx_mock):
    httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

    with pytest.raises(ReviewRequestFailed):
        ReviewClient(api_url=API_URL).review(code="x", language="python")


def test_review_unexpected_body(httpx_mock):
    httpx_mock.add_response(url=API_URL, json={"verdict": "meh"})

    with pytest.raises(ReviewRequestFailed):
        ReviewClient(api_url=API_URL).review(code="x", language="python")
