import pytest

from markedit.engine.flags import debug_enabled


@pytest.mark.parametrize(("value", "expected"), [("1", True), ("yes", True), ("0", False), ("false", False), ("", False)])
def test_debug_enabled_reads_env(monkeypatch, value, expected) -> None:
    monkeypatch.setenv("MARKEDIT_DEBUG_TEST", value)
    assert debug_enabled("MARKEDIT_DEBUG_TEST") is expected


def test_debug_enabled_unset(monkeypatch) -> None:
    monkeypatch.delenv("MARKEDIT_DEBUG_TEST", raising=False)
    assert debug_enabled("MARKEDIT_DEBUG_TEST") is False
