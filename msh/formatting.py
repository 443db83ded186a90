"""printf-style formatting with the flag, width and precision rules the shell relies on."""

from __future__ import annotations

import enum
import os
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterator

STDOUT_FILENO = 1

_ASCII_DIGITS = frozenset("0123456789")
_WIDTH_START = frozenset("123456789")
_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"


class FormatError(ValueError):
    """Raised for a malformed conversion or a missing or unsuitable argument."""


class Flag(enum.IntFlag):
    """Conversion flags that may follow the '%'."""

    ALT = 1 << 0
    ZERO = 1 << 1
    SPACE = 1 << 2
    PLUS = 1 << 3
    MINUS = 1 << 4


_FLAG_CHARS = {
    "#": Flag.ALT,
    "0": Flag.ZERO,
    " ": Flag.SPACE,
    "+": Flag.PLUS,
    "-": Flag.MINUS,
}


@dataclass(frozen=True)
class FormatSpec:
    """One parsed conversion. A precision of None means none was given."""

    specifier: str
    width: int = 0
    precision: int | None = None
    flags: Flag = Flag(0)

    @property
    def left_aligned(self) -> bool:
        return bool(self.flags & Flag.MINUS)

    @property
    def zero_padded(self) -> bool:
        """Zero padding applies only with '0', without '-', and without a precision."""
        return (
            bool(self.flags & Flag.ZERO)
            and not self.flags & Flag.MINUS
            and self.precision is None
        )


def _next_argument(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise FormatError("too few arguments for format") from None


def _scan_digits(fmt: str, pos: int) -> int:
    while pos < len(fmt) and fmt[pos] in _ASCII_DIGITS:
        pos += 1
    return pos


def parse_spec(fmt: str, pos: int, args: Iterator[Any]) -> tuple[FormatSpec, int]:
    """Parse the conversion whose '%' is at *pos*.

    A '*' precision takes its value from *args*. Returns the spec and the
    position just past it.
    """
    if fmt[pos:pos + 1] != "%":
        raise FormatError(f"no conversion at position {pos}")
    pos += 1

    flags = Flag(0)
    while pos < len(fmt) and fmt[pos] in _FLAG_CHARS:
        flags |= _FLAG_CHARS[fmt[pos]]
        pos += 1

    width = 0
    if pos < len(fmt) and fmt[pos] in _WIDTH_START:
        end = _scan_digits(fmt, pos)
        width = int(fmt[pos:end])
        pos = end

    precision: int | None = None
    if fmt[pos:pos + 1] == ".":
        pos += 1
        if fmt[pos:pos + 1] == "*":
            pos += 1
            value = _next_argument(args)
            if not isinstance(value, int):
                raise FormatError("'*' precision needs an integer argument")
            precision = None if value == -1 else value
        else:
            end = _scan_digits(fmt, pos)
            precision = int(fmt[pos:end]) if end > pos else 0
            pos = end

    specifier = fmt[pos:pos + 1]
    if specifier:
        pos += 1
    return FormatSpec(specifier, width, precision, flags), pos


def _pad(text: str, width: int, left: bool) -> str:
    return text.ljust(width) if left else text.rjust(width)


def _zero_pad(text: str, width: int) -> str:
    return text.rjust(width, "0")


def _apply_precision(digits: str, precision: int | None) -> str:
    if precision is None:
        return digits
    return digits.rjust(precision, "0")


def _sign(negative: bool, flags: Flag) -> str:
    if negative:
        return "-"
    if flags & Flag.PLUS:
        return "+"
    if flags & Flag.SPACE:
        return " "
    return ""


def _require_int(value: Any, specifier: str) -> int:
    if not isinstance(value, int):
        raise FormatError(f"%{specifier} needs an integer argument")
    return value


def _to_int32(value: int) -> int:
    return ((value + 2**31) % 2**32) - 2**31


def _to_uint32(value: int) -> int:
    return value % 2**32


def _in_base(value: int, digits: str) -> str:
    if value == 0:
        return digits[0]
    base = len(digits)
    out = []
    while value:
        value, rem = divmod(value, base)
        out.append(digits[rem])
    return "".join(reversed(out))


def _convert_char(spec: FormatSpec, value: Any) -> str:
    if isinstance(value, int):
        char = chr(value % 256)
    elif isinstance(value, str) and len(value) == 1:
        char = value
    else:
        raise FormatError("%c needs a single character or an integer")
    return _pad(char, spec.width, spec.left_aligned)


def _convert_str(spec: FormatSpec, value: Any) -> str:
    if value is None:
        if spec.precision is not None and 0 <= spec.precision < 6:
            return _pad("", spec.width, spec.left_aligned)
        text = "(null)"
    elif isinstance(value, str):
        text = value
    else:
        raise FormatError("%s needs a string or None")
    if spec.precision is not None and 0 <= spec.precision < len(text):
        text = text[:spec.precision]
    return _pad(text, spec.width, spec.left_aligned)


def _convert_ptr(spec: FormatSpec, value: Any) -> str:
    if value is None or value == 0:
        return _pad("(nil)", spec.width, spec.left_aligned)
    address = _require_int(value, spec.specifier) % 2**64
    digits = _apply_precision(_in_base(address, _LOWER_HEX), spec.precision)
    if spec.zero_padded:
        return "0x" + _zero_pad(digits, spec.width - 2)
    return _pad("0x" + digits, spec.width, spec.left_aligned)


def _convert_int(spec: FormatSpec, value: Any) -> str:
    number = _to_int32(_require_int(value, spec.specifier))
    if number == 0 and spec.precision == 0:
        return _pad("", spec.width, spec.left_aligned)
    digits = _apply_precision(str(abs(number)), spec.precision)
    sign = _sign(number < 0, spec.flags)
    if spec.zero_padded:
        width = spec.width - 1 if sign else spec.width
        return sign + _zero_pad(digits, width)
    return _pad(sign + digits, spec.width, spec.left_aligned)


def _convert_uint(spec: FormatSpec, value: Any) -> str:
    number = _to_uint32(_require_int(value, spec.specifier))
    if number == 0 and spec.precision == 0:
        return _pad("", spec.width, spec.left_aligned)
    digits = _apply_precision(str(number), spec.precision)
    if spec.zero_padded:
        return _zero_pad(digits, spec.width)
    return _pad(digits, spec.width, spec.left_aligned)


def _convert_hex(spec: FormatSpec, value: Any) -> str:
    number = _to_uint32(_require_int(value, spec.specifier))
    if number == 0 and spec.precision == 0:
        return _pad("", spec.width, spec.left_aligned)
    upper = spec.specifier == "X"
    digits = _apply_precision(
        _in_base(number, _UPPER_HEX if upper else _LOWER_HEX), spec.precision
    )
    prefix = ("0X" if upper else "0x") if spec.flags & Flag.ALT and number > 0 else ""
    if spec.zero_padded:
        return prefix + _zero_pad(digits, spec.width - len(prefix))
    return _pad(prefix + digits, spec.width, spec.left_aligned)


_CONVERTERS: dict[str, Callable[[FormatSpec, Any], str]] = {
    "c": _convert_char,
    "s": _convert_str,
    "p": _convert_ptr,
    "d": _convert_int,
    "i": _convert_int,
    "u": _convert_uint,
    "x": _convert_hex,
    "X": _convert_hex,
}

# A literal '%' takes no argument and ignores flags, width and precision.
_LITERAL_PERCENT = "%"
_KNOWN_SPECIFIERS = frozenset(_CONVERTERS) | {_LITERAL_PERCENT}


def convert(spec: FormatSpec, value: Any = None) -> str:
    """Render *value* as described by *spec*."""
    if spec.specifier == _LITERAL_PERCENT:
        return _LITERAL_PERCENT
    try:
        converter = _CONVERTERS[spec.specifier]
    except KeyError:
        raise FormatError(f"unknown conversion {spec.specifier!r}") from None
    return converter(spec, value)


def format_string(fmt: str, *args: Any) -> str:
    """Expand every conversion in *fmt* using *args* in order."""
    arguments = iter(args)
    pieces: list[str] = []
    pos = 0
    while (percent := fmt.find("%", pos)) >= 0:
        pieces.append(fmt[pos:percent])
        spec, pos = parse_spec(fmt, percent, arguments)
        if spec.specifier not in _KNOWN_SPECIFIERS:
            raise FormatError(f"unknown conversion {spec.specifier!r}")
        value = None
        if spec.specifier != _LITERAL_PERCENT:
            value = _next_argument(arguments)
        pieces.append(convert(spec, value))
    pieces.append(fmt[pos:])
    return "".join(pieces)


def dprintf(fd: int, fmt: str, *args: Any) -> int:
    """Format and write to file descriptor *fd*; return the bytes written."""
    data = format_string(fmt, *args).encode("utf-8", "surrogateescape")
    return os.write(fd, data)


def printf(fmt: str, *args: Any) -> int:
    """Format and write to standard output; return the bytes written."""
    sys.stdout.flush()
    return dprintf(STDOUT_FILENO, fmt, *args)