from django.shortcuts import render


def custom_404_view(request, exception=None):
    return render(request, "errors/404.html", {
        "message": "The page you were looking for doesn't exist.",
        "request_id": getattr(request, "request_id", None),
        "status_code": 404,
    }, status=404)
