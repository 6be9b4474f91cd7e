import pytest

from intbase.bases import SupportedBase, base_title, parse_base


def test_supported_base_radix_values() -> None:
    assert [base.radix for base in SupportedBase] == [2, 8, 10, 16]


def test_base_titles() -> None:
    assert base_title(SupportedBase.BINARY) == "Binary (2)"
    assert base_title(SupportedBase.OCTAL) == "Octal (8)"
    assert base_title(SupportedBase.DECIMAL) == "Decimal (10)"
    assert base_title(SupportedBase.HEXADECIMAL) == "Hexadecimal (16)"


def test_parse_base_accepts_radix_and_names() -> None:
    assert parse_base("16") is SupportedBase.HEXADECIMAL
    assert parse_base("hex") is SupportedBase.HEXADECIMAL
    assert parse_base(" Binary ") is SupportedBase.BINARY
    assert parse_base("oct") is SupportedBase.OCTAL
    assert parse_base("10") is SupportedBase.DECIMAL


def test_parse_base_rejects_unsupported_radix() -> None:
    with pytest.raises(ValueError, match="Unsupported base"):
        parse_base("3")
    with pytest.raises(ValueError, match="Unsupported base"):
        parse_base("base64")
