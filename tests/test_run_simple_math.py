# MIT License © 2025 Motohiro Suzuki
from __future__ import annotations

from pathlib import Path

import pytest

from run_simple_math import main


def test_prints_native_result(simple_math_lib: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--platform", "android", "--lib", str(simple_math_lib)])
    assert rc == 0
    assert capsys.readouterr().out.strip().endswith("Result from native .so: 12")


def test_custom_operands(simple_math_lib: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--platform", "android", "--lib", str(simple_math_lib), "40", "2"])
    assert rc == 0
    assert "Result from native .so: 42" in capsys.readouterr().out


def test_unsupported_platform_exits_1(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--platform", "win32"])
    assert rc == 1
    assert "not supported" in capsys.readouterr().err


def test_out_of_range_operand_exits_2(simple_math_lib: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--platform", "android", "--lib", str(simple_math_lib), str(2 ** 31), "0"])
    assert rc == 2
    assert "int32" in capsys.readouterr().err


def test_bad_operand_checked_before_platform(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--platform", "win32", str(2 ** 31), "0"])
    assert rc == 2
    assert "int32" in capsys.readouterr().err


def test_log_level_option(simple_math_lib: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--platform", "android", "--lib", str(simple_math_lib), "--log-level", "debug"])
    assert rc == 0
    assert "Result from native .so: 12" in capsys.readouterr().out


def test_unknown_log_level_option_rejected(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as ei:
        main(["--platform", "android", "--log-level", "chatty"])
    assert ei.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_unknown_log_level_env_rejected(
    simple_math_lib: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("NATIVE_MATH_LOG_LEVEL", "chatty")
    rc = main(["--platform", "android", "--lib", str(simple_math_lib)])
    assert rc == 2
    assert "unknown log level" in capsys.readouterr().err
