from __future__ import annotations

from typing import Iterator

import pytest

from undoable_text.runtime import telemetry


@pytest.fixture(autouse=True)
def reset_configuration() -> Iterator[None]:
    yield
    telemetry.configure()


def test_unknown_preset_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_config_and_preset_are_exclusive() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_loggers_are_cached_until_reconfigured() -> None:
    first = telemetry.get_logger("undoable_text.tests")

    assert telemetry.get_logger("undoable_text.tests") is first

    telemetry.configure(preset="development")
    assert telemetry.get_logger("undoable_text.tests") is not first


def test_env_flag_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNDOABLE_TEXT_NO_COLOR", "Yes")
    monkeypatch.setenv("UNDOABLE_TEXT_LOG_JSON", "0")

    assert telemetry._env_flag("NO_COLOR", False) is True
    assert telemetry._env_flag("LOG_JSON", True) is False
    assert telemetry._env_flag("MISSING", True) is True


def test_unsupported_level_rejected() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("history.test", level="shout")


def test_span_reraises_and_yields_handle() -> None:
    with telemetry.span("tests::ok", component=True, metadata={"k": 1}) as handle:
        assert handle.component_name == "tests::ok"
        assert handle.metadata == {"k": "1"}

    with pytest.raises(RuntimeError):
        with telemetry.span("tests::boom", component="tests"):
            raise RuntimeError("boom")
