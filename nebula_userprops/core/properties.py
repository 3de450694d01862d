# nebula_userprops/core/properties.py
# Copyright (c) 2026 Monolink Systems
# Licensed under AGPLv3 (Nebula Open Source Edition, non-corporate)
"""Decoder for Java-style ``.properties`` text.

Supports ``#``/``!`` comment lines, ``=``, ``:`` or whitespace separators,
backslash line continuation and the ``\\t \\n \\r \\f \\uXXXX`` escapes.
"""
import logging
import re
from typing import BinaryIO, Dict, Iterator, Optional, Tuple, Union

from .errors import PropertiesSyntaxError

logger = logging.getLogger("nebula_userprops.properties")

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_HEX_DIGITS = set("0123456789abcdefABCDEF")


def _continues(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """Yield (first physical line number, logical line) pairs."""
    pending = None
    start = 0
    for number, raw in enumerate(_LINE_BREAK_RE.split(text), start=1):
        line = raw.lstrip(_WHITESPACE)
        if pending is None:
            if not line or line[0] in "#!":
                continue
            start = number
            pending = ""
        if _continues(line):
            pending += line[:-1]
            continue
        yield start, pending + line
        pending = None
    if pending is not None:
        yield start, pending


def _split_entry(line: str) -> Tuple[str, str]:
    length = len(line)
    end = 0
    while end < length:
        char = line[end]
        if char == "\\":
            end += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        end += 1
    end = min(end, length)

    pos = end
    while pos < length and line[pos] in _WHITESPACE:
        pos += 1
    if pos < length and line[pos] in _SEPARATORS:
        pos += 1
    while pos < length and line[pos] in _WHITESPACE:
        pos += 1
    return line[:end], line[pos:]


def unescape(text: str, line: Optional[int] = None) -> str:
    out = []
    pos = 0
    length = len(text)
    while pos < length:
        char = text[pos]
        pos += 1
        if char != "\\":
            out.append(char)
            continue
        if pos >= length:
            break
        char = text[pos]
        pos += 1
        if char == "u":
            digits = text[pos:pos + 4]
            if len(digits) != 4 or not set(digits) <= _HEX_DIGITS:
                raise PropertiesSyntaxError("Malformed \\uxxxx encoding", line)
            out.append(chr(int(digits, 16)))
            pos += 4
            continue
        out.append(_ESCAPES.get(char, char))
    return "".join(out)


def parse_properties(text: str) -> Dict[str, str]:
    """Decode properties text into a dict kept in file order.

    A repeated key replaces the earlier value but keeps its first position.
    """
    if text.startswith("\ufeff"):
        text = text[1:]

    properties: Dict[str, str] = {}
    for number, line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        key = unescape(raw_key, number)
        value = unescape(raw_value, number)
        if key in properties:
            logger.debug("Key %r on line %d overrides an earlier entry", key, number)
        properties[key] = value
    return properties


def load_properties(source: Union[BinaryIO, bytes, str], encoding: str = "utf-8") -> Dict[str, str]:
    """Read a byte stream (or already read content) and decode it."""
    data = source.read() if hasattr(source, "read") else source
    if isinstance(data, bytes):
        try:
            data = data.decode(encoding)
        except UnicodeDecodeError as e:
            raise PropertiesSyntaxError(
                f"Content is not valid {encoding} at byte {e.start}"
            ) from e
    return parse_properties(data)
