import logging

import pytest
from django.core.exceptions import ValidationError
from django.http import Http404, HttpResponse
from django.test import RequestFactory

from blogflow.logging_filters import RequestIDFilter
from blogflow.middleware import RequestIDMiddleware, get_current_request_id
from posts.validation.errors import NotFoundError
from posts.validation.middleware import ErrorHandlingMiddleware


@pytest.fixture
def rf():
    return RequestFactory()


class TestRequestIDMiddleware:
    def test_generates_request_id(self, rf):
        middleware = RequestIDMiddleware(lambda request: HttpResponse("ok"))

        response = middleware(rf.get("/posts/"))

        assert len(response["X-Request-ID"]) == 36

    def test_reuses_incoming_request_id(self, rf):
        seen = {}

        def view(request):
            seen["id"] = get_current_request_id()
            return HttpResponse("ok")

        response = RequestIDMiddleware(view)(rf.get("/posts/", HTTP_X_REQUEST_ID="abc"))

        assert response["X-Request-ID"] == "abc"
        assert seen["id"] == "abc"
        assert get_current_request_id() == "no-id"

    def test_logs_one_line_per_request(self, rf, caplog):
        middleware = RequestIDMiddleware(lambda request: HttpResponse("ok", status=201))

        with caplog.at_level(logging.INFO, logger="blogflow.requests"):
            middleware(rf.post("/form_validations/posts/"))

        assert "POST /form_validations/posts/ 201" in caplog.text

    def test_filter_adds_request_id_to_records(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)

        assert RequestIDFilter().filter(record) is True
        assert record.request_id == "no-id"


class TestErrorHandlingMiddleware:
    def setup_method(self):
        self.middleware = ErrorHandlingMiddleware(lambda request: HttpResponse("ok"))

    def test_api_error_on_api_path_is_json(self, rf):
        request = rf.get("/api/v1/anything/")
        request.request_id = "rid"

        response = self.middleware.process_exception(request, NotFoundError("Post 1 not found"))

        assert response.status_code == 404
        assert b'"request_id": "rid"' in response.content
        assert b"Post 1 not found" in response.content

    def test_http404_outside_api_falls_through(self, rf):
        assert self.middleware.process_exception(rf.get("/posts/1/"), Http404()) is None

    def test_http404_for_json_client(self, rf):
        request = rf.get("/posts/1/", HTTP_ACCEPT="application/json")

        response = self.middleware.process_exception(request, Http404())

        assert response.status_code == 404
        assert b"RESOURCE_NOT_FOUND" in response.content

    def test_django_validation_error_for_api(self, rf):
        exc = ValidationError({"title": [ValidationError("Title can't be blank", code="presence")]})

        response = self.middleware.process_exception(rf.post("/api/v1/x/"), exc)

        assert response.status_code == 400
        assert b'"code": "presence"' in response.content

    def test_unexpected_error_on_page_falls_through(self, rf, caplog):
        with caplog.at_level(logging.ERROR):
            result = self.middleware.process_exception(rf.get("/posts/"), RuntimeError("boom"))

        assert result is None
        assert "boom" in caplog.text

    def test_unexpected_error_for_api_is_500(self, rf):
        response = self.middleware.process_exception(rf.get("/api/v1/x/"), RuntimeError("boom"))

        assert response.status_code == 500
        assert b"INTERNAL_ERROR" in response.content
