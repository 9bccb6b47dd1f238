"""Tests for the uvicorn entry point."""

from app import main
from app.config.settings import settings


def test_run_serves_app_with_configured_host_and_port(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: calls.append((args, kwargs)))

    main.run()

    assert calls == [(
        ("app.main:app",),
        {"host": settings.HOST, "port": settings.PORT, "reload": settings.DEBUG},
    )]
