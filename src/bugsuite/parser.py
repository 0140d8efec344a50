"""Flat record parser.

Input looks like JSON but is not: a single level object with exactly three
key/value pairs, no nesting, no arrays, no escapes::

    {"state": "open","timestamp": 1493393946,"comment": "Bug via JSON"}

Structural characters act as delimiters; the surviving tokens are paired
into a mapping and the typed fields are then read back by key name, so the
order of keys in the input does not matter.
"""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone

from .models import Bug, BugState

EXPECTED_TOKENS = 6
REQUIRED_KEYS = ("state", "timestamp", "comment")

_delimiter_re = re.compile(r'[{}":,]')


class ParseError(ValueError):
    pass


def tokenize(text: str) -> list[str]:
    # Non-blank tokens are kept verbatim, surrounding whitespace included.
    return [tok for tok in _delimiter_re.split(text) if tok.strip()]


def parse_flat_object(text: str) -> dict[str, str]:
    tokens = tokenize(text)
    if len(tokens) != EXPECTED_TOKENS:
        raise ParseError(
            f'Expected {EXPECTED_TOKENS} tokens in record, found {len(tokens)}: {text!r}'
        )
    return dict(zip(tokens[0::2], tokens[1::2]))


def _parse_timestamp(raw: str) -> datetime:
    try:
        seconds = float(raw)
    except ValueError as exc:
        raise ParseError(f'Timestamp is not numeric: {raw!r}') from exc
    if not math.isfinite(seconds):
        raise ParseError(f'Timestamp is not finite: {raw!r}')
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise ParseError(f'Timestamp out of range: {raw!r}') from exc


def parse_bug(text: str) -> Bug:
    fields = parse_flat_object(text)
    missing = [key for key in REQUIRED_KEYS if key not in fields]
    if missing:
        raise ParseError(f'Missing required key(s) {", ".join(missing)} in record: {text!r}')
    # Anything other than an exact "open" is treated as closed.
    state = BugState.OPEN if fields['state'] == BugState.OPEN.value else BugState.CLOSED
    return Bug(
        state=state,
        timestamp=_parse_timestamp(fields['timestamp']),
        comment=fields['comment'],
    )


__all__ = ["ParseError", "parse_bug", "parse_flat_object", "tokenize"]
