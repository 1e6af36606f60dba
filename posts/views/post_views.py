import logging

from django.contrib import messages
from django.shortcuts import get_object_or_404, redirect, render
from django.urls import reverse
from django.views.decorators.http import require_POST

from ..models import Post
from ..params import post_params

logger = logging.getLogger(__name__)


def _editor_context(post, validation_url, action_url, submit_label):
    return {
        "post": post,
        "errors": post.errors,
        "validation_url": validation_url,
        "action_url": action_url,
        "submit_label": submit_label,
    }


def post_list(request):
    posts = Post.objects.all()
    return render(request, "posts/list.html", {"posts": posts})


def post_detail(request, post_id):
    post = get_object_or_404(Post, pk=post_id)
    return render(request, "posts/detail.html", {"post": post})


def post_create(request):
    post = Post()
    status = 200

    if request.method == "POST":
        post.assign_attributes(post_params(request.POST))
        if post.validate():
            post.save()
            logger.info(f"Post {post.pk} created")
            messages.success(request, "Post was successfully created.")
            return redirect("posts:post_detail", post_id=post.pk)
        status = 422

    context = _editor_context(
        post,
        validation_url=reverse("form_validations:create"),
        action_url=reverse("posts:post_create"),
        submit_label="Create Post",
    )
    return render(request, "posts/new.html", context, status=status)


def post_update(request, post_id):
    post = get_object_or_404(Post, pk=post_id)
    status = 200

    if request.method == "POST":
        post.assign_attributes(post_params(request.POST))
        if post.validate():
            post.save()
            logger.info(f"Post {post.pk} updated")
            messages.success(request, "Post was successfully updated.")
            return redirect("posts:post_detail", post_id=post.pk)
        status = 422

    context = _editor_context(
        post,
        validation_url=reverse("form_validations:update", kwargs={"post_id": post.pk}),
        action_url=reverse("posts:post_update", kwargs={"post_id": post.pk}),
        submit_label="Update Post",
    )
    return render(request, "posts/edit.html", context, status=status)


@require_POST
def post_delete(request, post_id):
    post = get_object_or_404(Post, pk=post_id)
    post.delete()
    logger.info(f"Post {post_id} deleted")
    messages.success(request, "Post was successfully destroyed.")
    return redirect("posts:post_list")
