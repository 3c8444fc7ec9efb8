"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from enskit.config.logging import configure_logging, shorten_digests


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ens = logging.getLogger("enskit")
    ens_level = ens.level
    yield
    structlog.contextvars.clear_contextvars()
    root.handlers = original_handlers
    root.setLevel(original_level)
    ens.setLevel(ens_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("enskit").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("enskit").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("enskit.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "enskit.test"
        assert "timestamp" in parsed

    def test_stdlib_service_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("enskit.services.names").debug("namehash computed for %r", "eth")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "namehash computed for 'eth'"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "enskit.services.names"

    def test_quiet_suppresses_debug(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("enskit.services.names").debug("hidden")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1


ETH_NODE = "0x93cdeb708b7545dc668eb9280176169d1c33cfd8ed6f04690a0bcc88a93fc4ae"


class TestDigestShortening:
    def test_processor_abbreviates_digests(self) -> None:
        event = {"event": f"node {ETH_NODE} ready", "count": 3}
        out = shorten_digests(None, "debug", event)
        assert out["event"] == "node 0x93cdeb70…a93fc4ae ready"
        assert out["count"] == 3

    def test_shorter_hex_untouched(self) -> None:
        event = {"event": "address 0x00000000000C2E074eC69A0dFb2997BA6C7d2e1e"}
        assert shorten_digests(None, "info", dict(event)) == event

    def test_console_mode_shortens(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        logging.getLogger("enskit.services.names").debug("namehash computed: %s", ETH_NODE)
        err = capfd.readouterr().err
        assert "0x93cdeb70…a93fc4ae" in err
        assert ETH_NODE not in err

    def test_json_mode_keeps_full_digest(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("enskit.services.names").debug("namehash computed: %s", ETH_NODE)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == f"namehash computed: {ETH_NODE}"


class TestBoundContext:
    def test_network_and_suffix_on_every_event(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True, network="sepolia", suffix="base.eth")
        logging.getLogger("enskit.services.names").debug("label validated")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["network"] == "sepolia"
        assert parsed["suffix"] == "base.eth"

    def test_reconfigure_drops_previous_context(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True, network="goerli")
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("enskit.services.names").debug("plain")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert "network" not in parsed
