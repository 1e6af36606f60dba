"""
Live form validation endpoints.

The editor posts the whole form here on every field change. The post is
rebuilt from the submitted values and validated, and the form fields are
rendered back with inline errors. Nothing is ever saved.
"""

import logging

from django.http import HttpRequest, HttpResponse, QueryDict
from django.views.decorators.http import require_http_methods, require_POST

from ..models import Post
from ..params import post_params
from ..rendering import render_post_form
from ..validation.errors import NotFoundError

logger = logging.getLogger(__name__)


def _submitted_data(request: HttpRequest) -> QueryDict:
    # Django only parses POST bodies; PUT/PATCH bodies are decoded here.
    if request.method == "POST":
        return request.POST
    if request.content_type == "multipart/form-data":
        data, _files = request.parse_file_upload(request.META, request)
        return data
    return QueryDict(request.body, encoding=request.encoding)


def _render_checked(request: HttpRequest, post: Post) -> HttpResponse:
    is_valid = post.validate()
    logger.info(
        f"Form validation for post {post.pk or 'new'}: "
        f"{'valid' if is_valid else 'invalid fields ' + ', '.join(sorted(post.errors))}"
    )
    return render_post_form(request, post)


@require_POST
def create_check(request: HttpRequest) -> HttpResponse:
    post = Post(**post_params(request.POST))
    return _render_checked(request, post)


@require_http_methods(["POST", "PUT", "PATCH"])
def update_check(request: HttpRequest, post_id: int) -> HttpResponse:
    try:
        post = Post.objects.get(pk=post_id)
    except Post.DoesNotExist:
        raise NotFoundError(f"Post {post_id} not found")

    post.assign_attributes(post_params(_submitted_data(request)))
    return _render_checked(request, post)
