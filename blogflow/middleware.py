import time
import uuid
import logging
import threading

logger = logging.getLogger("blogflow.requests")

_thread_locals = threading.local()


class RequestIDMiddleware:
    """Tags every request with an id and logs one line per response."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.headers.get('X-Request-ID') or str(uuid.uuid4())
        request.request_id = request_id
        _thread_locals.request_id = request_id
        start = time.perf_counter()

        try:
            response = self.get_response(request)
            duration = time.perf_counter() - start
            logger.info(
                "%s %s %s %sms",
                request.method,
                request.path,
                response.status_code,
                int(duration * 1000)
            )
            response['X-Request-ID'] = request_id
            return response
        finally:
            _thread_locals.request_id = None


def get_current_request_id():
    return getattr(_thread_locals, 'request_id', None) or 'no-id'
