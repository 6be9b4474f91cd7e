import pytest

from intbase.cli import main


def _run(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    return excinfo.value.code


def test_cli_converts_number(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["ff", "hex", "10"]) == 0
    assert capsys.readouterr().out == "255\n"


def test_cli_all_lists_every_base(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["255", "dec", "--all"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "Binary (2): 11111111",
        "Octal (8): 377",
        "Decimal (10): 255",
        "Hexadecimal (16): ff",
    ]


def test_cli_invalid_number_exits_with_one(capsys: pytest.CaptureFixture[str]) -> None:
    assert _run(["12", "bin", "dec"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "not a valid Binary (2) number" in captured.err


def test_cli_rejects_unsupported_base() -> None:
    assert _run(["12", "3", "dec"]) == 2


def test_cli_requires_target_without_all() -> None:
    assert _run(["12", "dec"]) == 2
