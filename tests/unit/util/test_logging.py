"""Unit tests for logging and observability setup."""

import logging

import logfire
import pytest

from tagkit.config import ObservabilitySettings, Settings
from tagkit.util.logging import get_logger, setup_logging
from tagkit.util.observability import configure_logfire


@pytest.fixture
def basic_config(monkeypatch):
    """Record basicConfig calls instead of replacing the root handlers."""
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    level = logging.getLogger("tagkit").level
    yield calls
    logging.getLogger("tagkit").setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.mark.parametrize(
        "settings, expected",
        [
            (Settings(debug=True), logging.DEBUG),
            (Settings(environment="production"), logging.WARNING),
            (Settings(environment="development"), logging.INFO),
        ],
    )
    def test_level_from_environment(self, basic_config, settings, expected):
        setup_logging(settings)

        assert basic_config[0]["level"] == expected
        assert basic_config[0]["force"] is True
        assert logging.getLogger("tagkit").level == expected

    def test_get_logger(self):
        assert get_logger("tagkit.test") is logging.getLogger("tagkit.test")


class TestConfigureLogfire:
    """Tests for configure_logfire."""

    @pytest.fixture(autouse=True)
    def quiet_logfire(self, monkeypatch):
        """Keep Logfire unconfigured and drop the tagkit handlers afterwards."""
        monkeypatch.setattr(logfire, "info", lambda *args, **kwargs: None)
        tagkit_logger = logging.getLogger("tagkit")
        handlers = tagkit_logger.handlers[:]
        yield
        tagkit_logger.handlers[:] = handlers

    def test_forwards_tagkit_logger_once(self, monkeypatch):
        """The tagkit logger should get a single Logfire handler."""
        monkeypatch.setattr(logfire, "configure", lambda **kw: None)

        configure_logfire(Settings())
        configure_logfire(Settings())

        handlers = [
            h
            for h in logging.getLogger("tagkit").handlers
            if isinstance(h, logfire.LogfireLoggingHandler)
        ]
        assert len(handlers) == 1

    def test_console_only_without_token(self, monkeypatch):
        """Without a token nothing should be sent to Logfire cloud."""
        calls = []
        monkeypatch.setattr(logfire, "configure", lambda **kw: calls.append(kw))

        configure_logfire(Settings(environment="test"))

        assert calls[0]["send_to_logfire"] is False
        assert calls[0]["service_name"] == "tagkit"
        assert "token" not in calls[0]

    def test_token_enables_sending(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logfire, "configure", lambda **kw: calls.append(kw))

        configure_logfire(
            Settings(observability=ObservabilitySettings(logfire_token="secret"))
        )

        assert calls[0]["send_to_logfire"] is True
        assert calls[0]["token"] == "secret"

    def test_explicit_setting_wins(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logfire, "configure", lambda **kw: calls.append(kw))

        configure_logfire(
            Settings(
                observability=ObservabilitySettings(
                    logfire_token="secret", send_to_logfire=False
                )
            )
        )

        assert calls[0]["send_to_logfire"] is False
