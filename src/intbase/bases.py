from __future__ import annotations

from enum import Enum


class SupportedBase(Enum):
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16

    @property
    def radix(self) -> int:
        return self.value


TITLES = {
    SupportedBase.BINARY: "Binary (2)",
    SupportedBase.OCTAL: "Octal (8)",
    SupportedBase.DECIMAL: "Decimal (10)",
    SupportedBase.HEXADECIMAL: "Hexadecimal (16)",
}

ALIASES = {
    "bin": SupportedBase.BINARY,
    "binary": SupportedBase.BINARY,
    "oct": SupportedBase.OCTAL,
    "octal": SupportedBase.OCTAL,
    "dec": SupportedBase.DECIMAL,
    "decimal": SupportedBase.DECIMAL,
    "hex": SupportedBase.HEXADECIMAL,
    "hexadecimal": SupportedBase.HEXADECIMAL,
}


def base_title(base: SupportedBase) -> str:
    return TITLES[base]


def parse_base(text: str) -> SupportedBase:
    """Resolve a radix number ("16") or a name ("hex") to a SupportedBase."""
    cleaned = text.strip().lower()
    if cleaned in ALIASES:
        return ALIASES[cleaned]

    try:
        return SupportedBase(int(cleaned))
    except ValueError as exc:
        accepted = ", ".join(
            [str(base.radix) for base in SupportedBase] + sorted(ALIASES)
        )
        raise ValueError(
            f"Unsupported base: {text!r}. Expected one of: {accepted}."
        ) from exc
