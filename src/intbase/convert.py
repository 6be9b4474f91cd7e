from __future__ import annotations

import logging
from typing import Protocol

import numpy as np

from intbase.bases import SupportedBase

_NATIVE_INFO = np.iinfo(np.intp)
NATIVE_INT_MIN = int(_NATIVE_INFO.min)
NATIVE_INT_MAX = int(_NATIVE_INFO.max)

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


class ParseError(ValueError):
    """Text is not a valid integer literal under the given base."""

    def __init__(self, text: str, base: SupportedBase, reason: str) -> None:
        super().__init__(f"Invalid {base.name.lower()} number {text!r}: {reason}")
        self.text = text
        self.base = base
        self.reason = reason


class ErrorReporter(Protocol):
    def report_error(self, context: str, message: str) -> None: ...


class LoggingErrorReporter:
    """Forwards conversion failures to a stdlib logger at ERROR level."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def report_error(self, context: str, message: str) -> None:
        self._logger.error("%s: %s", context, message)


_default_reporter = LoggingErrorReporter()


def _split_sign(text: str) -> tuple[bool, str]:
    if text[:1] in {"+", "-"}:
        return text[0] == "-", text[1:]
    return False, text


def parse_integer(text: str, base: SupportedBase) -> int:
    if not text:
        raise ParseError(text, base, "empty input")

    negative, digits = _split_sign(text)
    if not digits:
        raise ParseError(text, base, "missing digits after sign")

    valid = _DIGITS[: base.radix]
    magnitude = 0
    for ch in digits:
        digit = valid.find(ch.lower())
        if digit < 0:
            raise ParseError(text, base, f"{ch!r} is not a base-{base.radix} digit")
        magnitude = magnitude * base.radix + digit
        if magnitude > NATIVE_INT_MAX + 1:
            raise ParseError(text, base, "out of native integer range")

    value = -magnitude if negative else magnitude
    if not NATIVE_INT_MIN <= value <= NATIVE_INT_MAX:
        raise ParseError(text, base, "out of native integer range")
    return value


def render_integer(value: int, base: SupportedBase) -> str:
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if base is SupportedBase.BINARY:
        digits = format(magnitude, "b")
    elif base is SupportedBase.OCTAL:
        digits = format(magnitude, "o")
    elif base is SupportedBase.HEXADECIMAL:
        digits = format(magnitude, "x")
    else:
        digits = format(magnitude, "d")
    return sign + digits


def _parse_or_report(
    text: str, source: SupportedBase, reporter: ErrorReporter | None
) -> int | None:
    try:
        return parse_integer(text, source)
    except ParseError as exc:
        (reporter or _default_reporter).report_error(
            f"{source.name.lower()} input", f"Invalid number {text!r} ({exc.reason})"
        )
        return None


def convert(
    text: str,
    source: SupportedBase,
    target: SupportedBase,
    reporter: ErrorReporter | None = None,
) -> str | None:
    """Convert ``text`` from ``source`` to ``target``.

    Returns ``None`` when ``text`` does not parse under ``source``; the
    failure goes to ``reporter`` (the module logger when omitted) and is
    never raised. Converting to the same base yields the canonical decimal
    string of the parsed value.
    """
    value = _parse_or_report(text, source, reporter)
    if value is None:
        return None

    if source != target:
        return render_integer(value, target)
    return str(value)


def convert_all(
    text: str,
    source: SupportedBase,
    reporter: ErrorReporter | None = None,
) -> dict[SupportedBase, str] | None:
    value = _parse_or_report(text, source, reporter)
    if value is None:
        return None
    return {base: render_integer(value, base) for base in SupportedBase}
