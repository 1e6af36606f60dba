"""Form rendering for posts."""

from typing import Optional

from django.http import HttpRequest, HttpResponse
from django.template.loader import render_to_string

from .models import Post

FORM_TEMPLATE = "posts/_form.html"


def render_post_form_markup(post: Post, request: Optional[HttpRequest] = None) -> str:
    """
    Render the form fields of ``post`` with its validation errors.

    The fragment holds no per-request values (the CSRF token lives in the
    enclosing form), so equal posts always render to identical markup.
    """
    return render_to_string(FORM_TEMPLATE, {"post": post, "errors": post.errors}, request=request)


def render_post_form(request: HttpRequest, post: Post, status: int = 200) -> HttpResponse:
    # Always the HTML fragment, whatever the request asked for.
    return HttpResponse(
        render_post_form_markup(post, request),
        content_type="text/html; charset=utf-8",
        status=status,
    )
