"""Rate limiting on the AI-backed endpoints."""

import pytest


@pytest.fixture
def limited_client(make_app, fake_gemini):
    app = make_app(RATELIMIT_ENABLED=True, ALGEBRA_RATE_LIMIT="1/minute")
    return app.test_client()


def test_second_solve_request_is_rejected(limited_client):
    first = limited_client.post("/api/algebra/solve", json={"problem": "2x = 4"})
    second = limited_client.post("/api/algebra/solve", json={"problem": "2x = 4"})

    assert first.status_code == 200
    assert second.status_code == 429
    assert second.get_json()["error"] == "Too many requests"


def test_page_views_do_not_spend_the_budget(limited_client):
    for _ in range(3):
        assert limited_client.get("/algebra-calculator").status_code == 200

    assert limited_client.post("/api/algebra/solve", json={"problem": "2x = 4"}).status_code == 200


def test_html_form_and_api_share_one_budget(limited_client):
    assert limited_client.post("/algebra-calculator", data={"problem": "2x = 4"}).status_code == 200

    response = limited_client.post("/algebra-calculator", data={"problem": "2x = 4"})

    assert response.status_code == 429
    assert "text/html" in response.content_type


def test_health_is_never_limited(make_app):
    app = make_app(RATELIMIT_ENABLED=True, RATELIMIT_DEFAULT="1/minute")
    client = app.test_client()

    assert [client.get("/health").status_code for _ in range(3)] == [200, 200, 200]
