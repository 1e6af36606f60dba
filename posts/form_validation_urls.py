from django.urls import path
from .views import form_validation_views

app_name = "form_validations"

urlpatterns = [
    path("posts/", form_validation_views.create_check, name="create"),
    path("posts/<int:post_id>/", form_validation_views.update_check, name="update"),
]
