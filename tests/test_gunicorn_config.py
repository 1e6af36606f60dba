import runpy
from pathlib import Path

CONFIG_PATH = Path(__file__).resolve().parent.parent / "gunicorn.conf.py"


def load_config():
    return runpy.run_path(str(CONFIG_PATH))


def test_reads_port_and_workers_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("WEB_CONCURRENCY", "3")
    monkeypatch.delenv("PRODUCTION", raising=False)

    config = load_config()

    assert config["bind"] == ["0.0.0.0:9001"]
    assert config["workers"] == 3
    assert config["wsgi_app"] == "blogflow.wsgi:application"
    assert "secure_scheme_headers" not in config


def test_production_trusts_forwarded_scheme(monkeypatch):
    monkeypatch.setenv("PRODUCTION", "true")

    config = load_config()

    assert config["secure_scheme_headers"] == {"X-FORWARDED-PROTO": "https"}
    assert config["loglevel"] == "info"


def test_only_errors_are_logged_by_gunicorn(monkeypatch):
    monkeypatch.delenv("PRODUCTION", raising=False)

    config = load_config()

    assert config["errorlog"] == "-"
    assert "accesslog" not in config
    assert "access_log_format" not in config
