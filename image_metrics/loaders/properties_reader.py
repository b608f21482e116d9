# Path: image_metrics/loaders/properties_reader.py
"""
Properties Reader for Image Metrics Module

Parses the java.util.Properties text format used for metric expectations:

    # comment
    ! also a comment
    analysis_results.classes.reachable=7051
    analysis_results.classes.reachable.tolerance = 3
    image_details.total_bytes : 43581520
    long.key = 12\\
               34

Supported: '=', ':' or whitespace separators, backslash line
continuations, escapes (\\t \\n \\r \\f \\uXXXX, backslash before any
other character yields that character). Later duplicates win.
"""

import re
from typing import Iterator

from ..core.logger import get_input_logger

logger = get_input_logger('properties_reader')

_WHITESPACE = ' \t\f'
_SEPARATORS = '=:'
_COMMENT_MARKERS = '#!'
_SIMPLE_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', 'f': '\f'}
_NEWLINE = re.compile(r'\r\n|\r|\n')


def _ends_with_continuation(line: str) -> bool:
    """True if the line ends with an odd number of backslashes."""
    count = len(line) - len(line.rstrip('\\'))
    return count % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    """Join continued natural lines, dropping blanks and comments."""
    pending = None

    for raw in _NEWLINE.split(text):
        line = raw.lstrip(_WHITESPACE)

        if pending is None:
            if not line or line[0] in _COMMENT_MARKERS:
                continue
            pending = ''

        if _ends_with_continuation(line):
            pending += line[:-1]
            continue

        yield pending + line
        pending = None

    # File ended on a continuation
    if pending:
        yield pending


def _unescape(text: str) -> str:
    out = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != '\\' or i + 1 >= len(text):
            out.append(char)
            i += 1
            continue

        nxt = text[i + 1]
        if nxt == 'u':
            digits = text[i + 2:i + 6]
            if len(digits) != 4 or not all(c in '0123456789abcdefABCDEF' for c in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: {text[i:i + 6]!r}")
            out.append(chr(int(digits, 16)))
            i += 6
        else:
            out.append(_SIMPLE_ESCAPES.get(nxt, nxt))
            i += 2
    return ''.join(out)


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line into raw (still escaped) key and value."""
    i = 0
    while i < len(line):
        char = line[i]
        if char == '\\':
            i += 2
            continue
        if char in _SEPARATORS or char in _WHITESPACE:
            break
        i += 1

    key = line[:i]
    rest = line[i:].lstrip(_WHITESPACE)
    if rest and rest[0] in _SEPARATORS:
        rest = rest[1:].lstrip(_WHITESPACE)
    return key, rest


def parse_properties(text: str) -> dict[str, str]:
    """
    Parse properties text into an ordered key -> value mapping.

    Args:
        text: Properties file content

    Returns:
        Dict in file order (last duplicate wins, keeping first position)

    Raises:
        ValueError: On a malformed \\uxxxx escape
    """
    properties = {}
    for line in _logical_lines(text):
        raw_key, raw_value = _split_entry(line)
        properties[_unescape(raw_key)] = _unescape(raw_value)

    logger.debug(f"Parsed {len(properties)} properties")
    return properties


__all__ = ['parse_properties']
