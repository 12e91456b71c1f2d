"""Tests for the uvicorn runner."""

import copy

import uvicorn
from uvicorn.config import LOGGING_CONFIG

from batchportal.web.runner import run_server


class TestRunServer:
    """Tests for run_server."""

    def test_custom_formats_leave_uvicorn_defaults_untouched(self, app_instance, config, monkeypatch):
        """Test that the access log format is customised on a private copy."""
        captured = {}
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: captured.update(kwargs))
        original = copy.deepcopy(LOGGING_CONFIG)

        run_server(app_instance, config)

        assert LOGGING_CONFIG == original
        assert "client_addr" in captured["log_config"]["formatters"]["access"]["fmt"]
        assert captured["host"] == "127.0.0.1"
        assert captured["port"] == 8000
