import logging
import re

import numpy as np

from fcrecord.record import FIELD_COUNT, Record

logger = logging.getLogger(__name__)

# Upper bound for indices: they are parsed as u64 regardless of platform width
INDEX_MAX = int(np.iinfo(np.uint64).max)

_INDEX_RE = re.compile(r'\+?[0-9]+')
# Unicode White_Space only; str.split() would also split on \x1c-\x1f
_WHITESPACE_RE = re.compile(r'[^\S\x1c-\x1f]+')


class ParseFailure(ValueError):
    """Raised when a line is not four unsigned integers followed by a float."""

    MESSAGE = 'failed to parse record from string'

    def __init__(self):
        super().__init__(self.MESSAGE)


def parse_index(token):
    if not _INDEX_RE.fullmatch(token):
        raise ValueError(f"Invalid unsigned integer: {token!r}")
    value = int(token)
    if value > INDEX_MAX:
        raise ValueError(f"Unsigned integer out of range: {token!r}")
    return value


def parse_weight(token):
    # float() alone would also take '1_0' and non-ASCII digits
    if '_' in token or not token.isascii():
        raise ValueError(f"Invalid float: {token!r}")
    return float(token)


def parse_record(line):
    parts = [p for p in _WHITESPACE_RE.split(line) if p]
    if len(parts) != FIELD_COUNT:
        logger.debug("Expected %d tokens, got %d: %r", FIELD_COUNT, len(parts), line)
        raise ParseFailure()

    try:
        indices = [parse_index(p) for p in parts[:4]]
        weight = parse_weight(parts[4])
    except ValueError as e:
        logger.debug("Rejected %r: %s", line, e)
        raise ParseFailure() from e

    return Record(*indices, weight)
