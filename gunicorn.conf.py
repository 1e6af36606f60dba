"""BlogFlow Gunicorn configuration; every value can be overridden from the environment."""

import multiprocessing
import os

IS_PRODUCTION = os.getenv("PRODUCTION") == "true"

wsgi_app = "blogflow.wsgi:application"
bind = [f"0.0.0.0:{int(os.getenv('PORT', 8000))}"]

workers = int(os.getenv("WEB_CONCURRENCY", min(multiprocessing.cpu_count() * 2 + 1, 9)))
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", 4))
max_requests = int(os.getenv("GUNICORN_MAX_REQUESTS", 1000))
max_requests_jitter = int(os.getenv("GUNICORN_MAX_REQUESTS_JITTER", 100))
timeout = int(os.getenv("GUNICORN_TIMEOUT", 30))
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", 10))

# Requests are logged by RequestIDMiddleware; gunicorn only reports errors.
forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "127.0.0.1")
if IS_PRODUCTION:
    secure_scheme_headers = {"X-FORWARDED-PROTO": "https"}
errorlog = "-"
loglevel = "info" if IS_PRODUCTION else "debug"
proc_name = "blogflow"
preload_app = True
