"""
Tests for picotest_cli/main.py
"""
from pathlib import Path

import pytest

from picotest.exit_status import ExitStatus
from picotest_cli.main import get_arguments, main


def write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


def test_get_arguments_defaults():
    args = get_arguments([])
    assert args.pattern == "test_*.py"
    assert args.verbose is False


def test_get_arguments_version(capsys):
    with pytest.raises(SystemExit):
        get_arguments(["--version"])
    assert "picotest" in capsys.readouterr().out


def test_main_success(tmp_path: Path, capsys):
    write_file(tmp_path / "test_ok.py", (
        "from picotest import TEST, expect_eq\n\n"
        "@TEST('Math')\n"
        "def adds():\n"
        "    expect_eq(2, 1+1)\n"
    ))
    assert main([str(tmp_path)]) == ExitStatus.SUCCESS.value
    assert capsys.readouterr().out == "1 tests success.\n"


def test_main_failure(tmp_path: Path, capsys):
    """
    Test main with a failing test file.
    Verify the report lines and the failure exit status.
    """
    test_file = tmp_path / "test_bad.py"
    write_file(test_file, (
        "from picotest import TEST, expect_eq\n\n"
        "@TEST('Math')\n"
        "def adds():\n"
        "    expect_eq(3, 1+1)\n"
    ))
    assert main([str(test_file)]) == ExitStatus.FAILURE.value

    out = capsys.readouterr().out
    assert out.splitlines() == [
        "1 of 1 tests failed.",
        "[ FAILED ] Math",
        f"adds : {test_file.resolve()}(5): error: Expected:3 == 1+1, Actual:3 == 2",
    ]


def test_main_no_files(tmp_path: Path, capsys):
    assert main([str(tmp_path / "nothing_*.py")]) == ExitStatus.FAILURE.value
    assert "No test files matching" in capsys.readouterr().out


def test_main_reports_errors(tmp_path: Path, capsys):
    write_file(tmp_path / "test_broken.py", "import module_that_does_not_exist_anywhere\n")
    assert main([str(tmp_path)]) == ExitStatus.FAILURE.value
    assert "Error:" in capsys.readouterr().out


def test_main_verbose(tmp_path: Path, capsys):
    write_file(tmp_path / "test_v.py", (
        "from picotest import TEST\n\n"
        "@TEST('V')\n"
        "def quiet():\n"
        "    pass\n"
    ))
    assert main(["-v", str(tmp_path)]) == ExitStatus.SUCCESS.value
    out = capsys.readouterr().out
    assert "Loading:" in out
    assert "Running: V.quiet" in out
