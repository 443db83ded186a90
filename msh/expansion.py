"""Quote removal and variable expansion for command arguments."""

from __future__ import annotations

from typing import Mapping

from msh.lexer import is_delimiter

_QUOTES = frozenset("'\"")


def _name_end(text: str, pos: int) -> int:
    """Return the end of the variable name starting at *pos*."""
    while pos < len(text):
        char = text[pos]
        if char == "$" or char in _QUOTES or is_delimiter(char):
            break
        pos += 1
    return pos


def expand_argument(
    text: str, status: int, env: Mapping[str, str] | None = None
) -> str:
    """Remove quotes from *text* and expand ``$?`` and ``$NAME``.

    Nothing is expanded inside single quotes. ``$?`` becomes *status*. An
    unset variable expands to nothing, and a ``$`` not followed by a name is
    kept. Expanded values are not scanned again.
    """
    variables: Mapping[str, str] = env if env is not None else {}
    out: list[str] = []
    in_single = in_double = False
    pos = 0
    while pos < len(text):
        char = text[pos]
        pos += 1
        if char == "'" and not in_double:
            in_single = not in_single
            continue
        if char == '"' and not in_single:
            in_double = not in_double
            continue
        if char == "$" and not in_single:
            if text[pos:pos + 1] == "?":
                out.append(str(status))
                pos += 1
                continue
            end = _name_end(text, pos)
            if end > pos:
                value = variables.get(text[pos:end])
                if value:
                    out.append(value)
                pos = end
                continue
        out.append(char)
    return "".join(out)