"""API URL routing for BlogFlow."""
from django.urls import path
from .validation_views import validation_constraints

urlpatterns = [
    path('validation/constraints/', validation_constraints, name='validation-constraints'),
]
