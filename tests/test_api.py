import pytest
from django.urls import reverse
from rest_framework.exceptions import NotAuthenticated, NotFound

from posts.validation.api_exceptions import custom_exception_handler


@pytest.mark.django_db
class TestValidationConstraints:
    def test_exposes_post_constraints(self, client):
        response = client.get(reverse("validation-constraints"))

        assert response.status_code == 200
        payload = response.json()
        assert payload["success"] is True
        assert payload["data"]["post"] == {
            "title": {"required": True, "min_length": None, "max_length": 255},
            "body": {"required": False, "min_length": 10, "max_length": None},
        }

    def test_request_id_matches_header(self, client):
        response = client.get(reverse("validation-constraints"), HTTP_X_REQUEST_ID="req-123")

        assert response.json()["request_id"] == "req-123"
        assert response["X-Request-ID"] == "req-123"

    def test_wrong_method_uses_error_envelope(self, client):
        response = client.post(reverse("validation-constraints"))

        assert response.status_code == 405
        payload = response.json()
        assert payload["success"] is False
        assert payload["error"]["code"] == "REQUEST_INVALID"
        assert "not allowed" in payload["error"]["message"]


class TestExceptionHandler:
    def test_not_authenticated_uses_generic_request_code(self):
        response = custom_exception_handler(NotAuthenticated(), {"request": None})

        assert response.status_code == 401
        assert response.data["error"]["code"] == "REQUEST_INVALID"
        assert response.data["error"]["message"] == "Authentication credentials were not provided."

    def test_not_found_keeps_resource_code(self):
        response = custom_exception_handler(NotFound(), {"request": None})

        assert response.status_code == 404
        assert response.data["error"]["code"] == "RESOURCE_NOT_FOUND"
