"""Tests for the ``tempconv`` command line."""

from __future__ import annotations

import json
import logging

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from tempconv.cli.main import cli, main
from tempconv.errors import UnknownScaleError


def _invoke(*args: str) -> tuple[int, str]:
    result = CliRunner().invoke(cli, list(args))
    return result.exit_code, result.stdout


class TestConvertCommand:
    def test_json_output(self) -> None:
        code, output = _invoke("--format", "json", "convert", "100", "C", "F")
        assert code == 0
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["command"] == "convert"
        assert parsed["data"]["result"] == 212.0

    def test_negative_value(self) -> None:
        code, output = _invoke("--format", "json", "convert", "-40", "c", "f")
        assert code == 0
        assert json.loads(output)["data"]["result"] == -40.0

    def test_clamped_json(self) -> None:
        code, output = _invoke("--format", "json", "convert", "-500", "F", "K")
        assert code == 0
        data = json.loads(output)["data"]
        assert data["result"] == 0.0
        assert data["clamped"] is True

    def test_rich_output(self) -> None:
        code, output = _invoke("--format", "rich", "convert", "0", "C", "K")
        assert code == 0
        assert "273.15 K" in output

    def test_format_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEMPCONV_OUTPUT_FORMAT", "rich")
        code, output = _invoke("convert", "100", "C", "F")
        assert code == 0
        assert "212 °F" in output

    def test_unknown_scale_raises(self) -> None:
        result = CliRunner().invoke(cli, ["--format", "json", "convert", "1", "X", "C"])
        assert result.exit_code == 1
        assert isinstance(result.exception, UnknownScaleError)


class TestTableCommand:
    def test_json_lists_all_scales(self) -> None:
        code, output = _invoke("--format", "json", "table", "100", "c")
        assert code == 0
        data = json.loads(output)["data"]
        assert [d["to_scale"] for d in data] == ["c", "f", "k"]
        assert data[0]["result"] == 100.0
        assert data[1]["result"] == 212.0

    def test_rich_table(self) -> None:
        code, output = _invoke("--format", "rich", "table", "32", "F")
        assert code == 0
        assert "Celsius" in output
        assert "Kelvin" in output


class TestScalesCommand:
    def test_json(self) -> None:
        code, output = _invoke("--format", "json", "scales")
        assert code == 0
        data = json.loads(output)["data"]
        assert {d["code"]: d["absolute_zero"] for d in data} == {
            "C": -273.15,
            "F": -459.67,
            "K": 0.0,
        }

    def test_rich(self) -> None:
        code, output = _invoke("--format", "rich", "scales")
        assert code == 0
        assert "Temperature Scales" in output


class TestQuietAndVerbose:
    def test_quiet_keeps_stdout_empty(self) -> None:
        code, output = _invoke("--quiet", "convert", "1", "C", "F")
        assert code == 0
        assert output == ""

    def test_verbose_logs_to_stderr(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pkg_logger = logging.getLogger("tempconv")
        monkeypatch.setattr(pkg_logger, "handlers", [])
        monkeypatch.setattr(pkg_logger, "level", logging.NOTSET)
        monkeypatch.setattr(pkg_logger, "propagate", True)

        result = CliRunner().invoke(
            cli, ["--verbose", "--format", "json", "convert", "1", "c", "f"]
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout)["data"]["result"] == pytest.approx(33.8)
        assert any(isinstance(h, RichHandler) for h in pkg_logger.handlers)
        assert pkg_logger.level == logging.DEBUG
        assert pkg_logger.propagate is False

    def test_help(self) -> None:
        code, output = _invoke("--help")
        assert code == 0
        assert "convert" in output
        assert "--verbose" in output


class TestMain:
    def test_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["--format", "json", "convert", "0", "c", "k"])
        assert json.loads(capsys.readouterr().out)["data"]["result"] == 273.15

    def test_unknown_scale_exits_1(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["convert", "1", "c", "r"])
        assert exc_info.value.code == 1
        parsed = json.loads(capsys.readouterr().out)
        assert parsed["ok"] is False
        assert parsed["command"] == "convert"
        assert parsed["error"]["code"] == "unknown_scale"

    def test_unknown_scale_rich(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit):
            main(["--format", "rich", "convert", "1", "R", "c"])
        assert "Unknown temperature scale 'R'" in capsys.readouterr().out

    def test_unknown_scale_honours_inline_format(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--format=rich", "convert", "1", "c", "r"])
        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Error: Unknown temperature scale 'r'" in out
        assert "\"ok\"" not in out

    def test_unknown_scale_format_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("TEMPCONV_OUTPUT_FORMAT", "rich")
        with pytest.raises(SystemExit):
            main(["table", "1", "x"])
        assert "Error: Unknown temperature scale 'x'" in capsys.readouterr().out

    def test_usage_error_exits_2(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["convert", "not-a-number", "c", "f"])
        assert exc_info.value.code == 2
