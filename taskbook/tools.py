"""Console helpers: parsing typed values and reading them from standard input."""

from __future__ import annotations

import re
import sys
from typing import Callable, Optional, TypeVar

T = TypeVar("T")

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


class InputError(ValueError):
    """Raised when input cannot be read, written or converted."""


def bounded_int(bits: int, signed: bool = True) -> Callable[[str], int]:
    """Return a converter accepting only integers that fit a fixed-width type."""
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        pattern = _SIGNED_INT
    else:
        low, high = 0, (1 << bits) - 1
        pattern = _UNSIGNED_INT

    def convert(text: str) -> int:
        if not pattern.fullmatch(text):
            raise ValueError(f"invalid integer literal: {text!r}")
        value = int(text)
        if not low <= value <= high:
            raise ValueError(f"{value} does not fit in {bits} bits")
        return value

    convert.__name__ = f"{'i' if signed else 'u'}{bits}"
    return convert


U16 = bounded_int(16, signed=False)


def parse(text: str, kind: Callable[[str], T] = str) -> T:
    """Convert the stripped text with ``kind``."""
    try:
        return kind(text.strip())
    except (ValueError, TypeError) as exc:
        raise InputError("Не удалось преобразовать строку к заданному типу") from exc


def parse_many(
    text: str, kind: Callable[[str], T] = str, delimiter: Optional[str] = None
) -> list[T]:
    """Split the text by ``delimiter`` (a space by default) and convert every non-empty part."""
    separator = " " if delimiter is None else delimiter
    values = []
    for token in text.split(separator):
        if not token:
            continue
        try:
            values.append(parse(token, kind))
        except InputError as exc:
            raise InputError(
                "Не удалось преобразовать часть строки к заданному типу"
            ) from exc
    return values


def say(text: str) -> None:
    """Print a line indented for the task being solved."""
    print(f"\t{text}")


def write(text: str) -> None:
    """Print text without a trailing newline and flush it."""
    try:
        print(text, end="", flush=True)
    except OSError as exc:
        raise InputError("Не удалось отправить строку") from exc


def _read_line() -> str:
    try:
        return sys.stdin.readline()
    except OSError as exc:
        raise InputError("Не удалось считать строку") from exc


def _prompt(prompt: Optional[str]) -> None:
    write(f"\t{prompt} " if prompt is not None else "\t")


def read(kind: Callable[[str], T] = str, prompt: Optional[str] = None) -> T:
    """Show an indented prompt, read one line and convert it with ``kind``."""
    _prompt(prompt)
    return parse(_read_line(), kind)


def read_many(
    kind: Callable[[str], T] = str,
    prompt: Optional[str] = None,
    delimiter: Optional[str] = None,
) -> list[T]:
    """Show an indented prompt, read one line and convert each of its parts."""
    _prompt(prompt)
    return parse_many(_read_line(), kind, delimiter)


def read_option() -> int:
    """Read a menu option as an unsigned 16-bit integer."""
    return parse(_read_line(), U16)


def read_plain(kind: Callable[[str], T] = str) -> T:
    """Read one line without a prompt and convert it."""
    return parse(_read_line(), kind)


def read_plain_many(kind: Callable[[str], T] = str) -> list[T]:
    """Read one line without a prompt and convert its space-separated parts."""
    return parse_many(_read_line(), kind, " ")