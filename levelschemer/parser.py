"""Reader for the plain-text level scheme description format."""

from __future__ import annotations

import os
from typing import Iterable

from levelschemer.scheme import LevelScheme

SEPARATOR = "==="


class SchemeParseError(ValueError):
    """Raised when a line of a scheme description cannot be read."""

    def __init__(self, message: str, lineno: int | None = None) -> None:
        self.lineno = lineno
        super().__init__(f"line {lineno}: {message}" if lineno is not None else message)


def _number(token: str, lineno: int) -> float:
    try:
        return float(token)
    except ValueError:
        raise SchemeParseError(f"expected a number, got {token!r}", lineno) from None


def _require(fields: list[str], count: int, tag: str, lineno: int) -> None:
    if len(fields) < count:
        raise SchemeParseError(
            f"{tag} needs {count} fields, got {len(fields)}", lineno
        )


def _parse_level(scheme: LevelScheme, rest: str, lineno: int) -> None:
    fields = rest.split()
    _require(fields, 3, "LEVEL:", lineno)
    scheme.add_level(_number(fields[0], lineno), fields[1], fields[2])


def _parse_threshold(scheme: LevelScheme, rest: str, lineno: int) -> None:
    fields = rest.split()
    _require(fields, 5, "THRESHOLD:", lineno)
    energy = _number(fields[0], lineno)
    r, g, b = (_number(token, lineno) for token in fields[2:5])
    dash: list[float] = []
    for token in fields[5:]:
        try:
            dash.append(float(token))
        except ValueError:
            break
    scheme.add_threshold(energy, fields[1], dash, r, g, b)


def _parse_transition(scheme: LevelScheme, rest: str, lineno: int) -> None:
    fields = rest.split()
    _require(fields, 4, "TRANSITION:", lineno)
    scheme.add_transition(
        _number(fields[0], lineno),
        _number(fields[1], lineno),
        fields[2],
        _number(fields[3], lineno),
    )


def _parse_isotope(scheme: LevelScheme, rest: str, lineno: int) -> None:
    scheme.isotope_label = rest.strip()


_HANDLERS = {
    "ISOTOPE:": _parse_isotope,
    "LEVEL:": _parse_level,
    "THRESHOLD:": _parse_threshold,
    "TRANSITION:": _parse_transition,
}


def parse_lines(lines: Iterable[str]) -> list[LevelScheme]:
    """Read schemes from lines of text; schemes are separated by ``===`` lines.

    A scheme without levels is not emitted. Unknown tags are ignored.
    """
    schemes: list[LevelScheme] = []
    current = LevelScheme()
    for lineno, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line or line.startswith("#"):
            continue
        if line == SEPARATOR:
            if current.levels:
                schemes.append(current)
                current = LevelScheme()
            continue
        parts = line.split(maxsplit=1)
        if not parts:
            continue
        handler = _HANDLERS.get(parts[0])
        if handler is not None:
            handler(current, parts[1] if len(parts) > 1 else "", lineno)
    if current.levels:
        schemes.append(current)
    return schemes


def parse_text(text: str) -> list[LevelScheme]:
    """Read schemes from a whole document held in a string."""
    return parse_lines(text.splitlines())


def parse_file(path: str | os.PathLike[str]) -> list[LevelScheme]:
    """Read schemes from a UTF-8 text file."""
    with open(path, encoding="utf-8") as handle:
        return parse_lines(handle)