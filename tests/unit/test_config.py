"""
Unit tests for TracingConfig and tracer id providers.
"""

import pytest

from tracespan.config import (
    ENV_ENABLED,
    ENV_MAX_BUFFERED_SPANS,
    ENV_TRACER_ID,
    TracingConfig,
)
from tracespan.models.milli_span import MilliSpan
from tracespan.models.null_span import NULL_SPAN
from tracespan.tracer_id import ConfigTracerIdProvider, StaticTracerIdProvider


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear tracing variables and point dotenv at an empty file."""
    for name in (ENV_TRACER_ID, ENV_MAX_BUFFERED_SPANS, ENV_ENABLED):
        monkeypatch.delenv(name, raising=False)
    dotenv_file = tmp_path / ".env"
    dotenv_file.write_text("")
    return dotenv_file


class TestTracingConfig:
    """Test cases for TracingConfig."""

    def test_defaults(self, clean_env):
        config = TracingConfig.from_env(str(clean_env))
        assert config == TracingConfig()
        assert config.tracer_id == ""
        assert config.max_buffered_spans is None
        assert config.enabled is True

    def test_reads_environment(self, clean_env, monkeypatch):
        monkeypatch.setenv(ENV_TRACER_ID, "worker-7")
        monkeypatch.setenv(ENV_MAX_BUFFERED_SPANS, "100")
        monkeypatch.setenv(ENV_ENABLED, "false")

        config = TracingConfig.from_env(str(clean_env))

        assert config.tracer_id == "worker-7"
        assert config.max_buffered_spans == 100
        assert config.enabled is False

    def test_reads_dotenv_file(self, clean_env, monkeypatch):
        clean_env.write_text(f"{ENV_TRACER_ID}=from-dotenv\n")
        # register the variable so the value loaded from .env is undone on teardown
        monkeypatch.setenv(ENV_TRACER_ID, "")
        monkeypatch.delenv(ENV_TRACER_ID)

        config = TracingConfig.from_env(str(clean_env))

        assert config.tracer_id == "from-dotenv"

    @pytest.mark.parametrize("value", ["many", "0", "-3"])
    def test_invalid_max_buffered_spans(self, clean_env, monkeypatch, value):
        monkeypatch.setenv(ENV_MAX_BUFFERED_SPANS, value)
        with pytest.raises(ValueError):
            TracingConfig.from_env(str(clean_env))

    def test_invalid_enabled(self, clean_env, monkeypatch):
        monkeypatch.setenv(ENV_ENABLED, "maybe")
        with pytest.raises(ValueError):
            TracingConfig.from_env(str(clean_env))

    def test_new_span_stamps_tracer_id(self):
        span = TracingConfig(tracer_id="proc-1").new_span("op")
        assert isinstance(span, MilliSpan)
        assert span.tracer_id == "proc-1"
        assert span.description == "op"

    def test_new_span_disabled_returns_null_span(self):
        assert TracingConfig(enabled=False).new_span("op") is NULL_SPAN


class TestTracerIdProviders:
    """Test cases for tracer id providers."""

    def test_static_provider(self):
        assert StaticTracerIdProvider("abc").get_tracer_id() == "abc"

    def test_static_provider_requires_str(self):
        with pytest.raises(TypeError):
            StaticTracerIdProvider(None)

    def test_config_provider_follows_config(self):
        config = TracingConfig(tracer_id="first")
        provider = ConfigTracerIdProvider(config)
        config.tracer_id = "second"
        assert provider.get_tracer_id() == "second"
