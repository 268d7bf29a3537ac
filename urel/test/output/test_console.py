"""Tests for urel.output.console module."""

from __future__ import annotations

import pytest

from urel.output.console import ConsoleProtocol, MockConsole, RichConsole, Style


class TestMockConsole:
    def test_print_captures_message(self) -> None:
        console = MockConsole()
        console.print("Semantic-release running in PACKAGE mode")
        assert console.outputs[0].message == "Semantic-release running in PACKAGE mode"
        assert console.outputs[0].style == Style.DEFAULT

    def test_prefixes(self) -> None:
        console = MockConsole()
        console.success("wrote .releaserc.json")
        console.error("failed")
        console.warning("careful")
        assert console.messages == [
            "OK wrote .releaserc.json",
            "error: failed",
            "warning: careful",
        ]
        assert console.has_error()

    def test_find_and_text(self) -> None:
        console = MockConsole()
        console.print("root: /repo")
        console.print("mode: TEMPLATE")
        assert [o.message for o in console.find("mode")] == ["mode: TEMPLATE"]
        assert console.text == "root: /repo\nmode: TEMPLATE"


class TestRichConsole:
    def test_satisfies_protocol(self) -> None:
        console: ConsoleProtocol = RichConsole()
        assert console is not None

    def test_print_is_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().print("Updated Unity package.json to version [1.0.0]")
        out = capsys.readouterr().out
        assert out == "Updated Unity package.json to version [1.0.0]\n"

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().error("failed to read package.json")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "failed to read package.json" in captured.err
