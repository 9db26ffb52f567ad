"""Tests for CLI Ensure utility class."""

import pytest

from javaver.cli.ensure import Ensure


class TestEnsureInvariant:
    def test_passes_when_true(self) -> None:
        Ensure.invariant(True, "never shown")

    def test_exits_with_code_one_when_false(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.invariant(False, "Custom error message")

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        # user_output routes to stderr
        assert "Error:" in captured.err
        assert "Custom error message" in captured.err
