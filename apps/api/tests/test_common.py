import json

import pytest
from django.test import RequestFactory, override_settings

from apps.api.common.errors import AlreadySubmitted
from apps.api.common.middleware import UnhandledExceptionMiddleware


@pytest.fixture
def middleware():
    return UnhandledExceptionMiddleware(lambda request: None)


def test_domain_error_outside_drf(middleware):
    request = RequestFactory().post("/anything/")

    res = middleware.process_exception(request, AlreadySubmitted("Answer sheet has already been submitted"))

    assert res.status_code == 409
    assert json.loads(res.content) == {
        "detail": "Answer sheet has already been submitted",
        "code": "already_submitted",
    }


@override_settings(DEBUG=False, CORS_ALLOW_ALL_ORIGINS=False, CORS_ALLOWED_ORIGINS=["https://app.example.com"], CORS_ALLOW_CREDENTIALS=True)
def test_unhandled_error_is_500_with_cors(middleware):
    request = RequestFactory().get("/anything/", HTTP_ORIGIN="https://app.example.com")

    res = middleware.process_exception(request, RuntimeError("boom"))

    assert res.status_code == 500
    assert b"internal_error" in res.content
    assert b"boom" not in res.content
    assert res["Access-Control-Allow-Origin"] == "https://app.example.com"
    assert res["Access-Control-Allow-Credentials"] == "true"


@override_settings(DEBUG=False, CORS_ALLOW_ALL_ORIGINS=False, CORS_ALLOWED_ORIGINS=[])
def test_unknown_origin_gets_no_cors_header(middleware):
    request = RequestFactory().get("/anything/", HTTP_ORIGIN="https://evil.example.com")

    res = middleware.process_exception(request, RuntimeError("boom"))

    assert "Access-Control-Allow-Origin" not in res


@pytest.mark.django_db
def test_health(api_client):
    res = api_client.get("/health/")

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "healthy"
    assert body["checks"] == {"database": "ok"}
    assert body["limits"]["mcq_option_max"] == 5
