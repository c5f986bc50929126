"""String helpers - base64, trimming and delimiter-based extraction."""

from __future__ import annotations
import base64
from itertools import takewhile
from typing import Dict, List, Union

from .config import BASE64_ALPHABET, EXTRACT_MAP_IGNORED, EXTRACT_VECTOR_IGNORED

_BASE64_CHARS = frozenset(BASE64_ALPHABET)


def base64_encode(data: Union[str, bytes]) -> str:
    """Encode data as standard base64 with '=' padding.

    Strings are encoded as UTF-8 first.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return base64.b64encode(data).decode("ascii")


def base64_decode(text: str) -> bytes:
    """Decode standard base64, stopping at the first non-alphabet character.

    Padding, whitespace and anything after them are ignored, as are trailing
    bits that do not make up a whole byte.
    """
    body = "".join(takewhile(lambda c: c in _BASE64_CHARS, text))
    if len(body) % 4 == 1:
        body = body[:-1]
    body += "=" * (-len(body) % 4)
    return base64.b64decode(body, validate=True)


def trim_spaces(source: str) -> str:
    """Trim leading and trailing spaces (and only spaces)."""
    return source.strip(" ")


def _split_ignoring(text: str, delimiter: str, ignored: str) -> List[str]:
    """Split on delimiter after dropping ignored characters.

    An empty trailing piece is not emitted, inner empty pieces are.
    """
    pieces: List[str] = []
    current: List[str] = []
    for c in text:
        if c in ignored:
            continue
        if c == delimiter:
            pieces.append("".join(current))
            current = []
        else:
            current.append(c)
    if current:
        pieces.append("".join(current))
    return pieces


def extract_vector(text: str, delimiter: str = ",",
                   ignored_characters: str = EXTRACT_VECTOR_IGNORED) -> List[str]:
    """Split text into value strings.

    Example:
        >>> extract_vector("[1, 2, 3]")
        ['1', '2', '3']
    """
    return _split_ignoring(text, delimiter, ignored_characters)


def extract_map(text: str, keyval_delimiter: str = "=", entry_delimiter: str = "\n",
                ignored_characters: str = EXTRACT_MAP_IGNORED) -> Dict[str, str]:
    """Split text into key/value pairs.

    Entries are separated by entry_delimiter and split at the first
    keyval_delimiter. An entry without one maps to itself. Later duplicate
    keys overwrite earlier ones.

    Example:
        >>> extract_map("a = 1\\nb = 2")
        {'a': '1', 'b': '2'}
    """
    result: Dict[str, str] = {}
    for entry in _split_ignoring(text, entry_delimiter, ignored_characters):
        key, sep, value = entry.partition(keyval_delimiter)
        result[key] = value if sep else entry
    return result
