from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView
from posts import health

handler404 = "posts.views.custom_404_view"

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", health.health_check, name="health_check"),
    path("health/live/", health.liveness_check, name="liveness_check"),
    path("api/v1/", include("posts.api.urls")),
    path("form_validations/", include("posts.form_validation_urls", namespace="form_validations")),
    path("posts/", include("posts.urls", namespace="posts")),
    path("", RedirectView.as_view(pattern_name="posts:post_list", permanent=False), name="home"),
]
