from fcrecord.parser import INDEX_MAX, ParseFailure, parse_record
from fcrecord.record import DEFAULT_EPSILON, FIELD_COUNT, Record, approx_equals

__all__ = [
    'DEFAULT_EPSILON',
    'FIELD_COUNT',
    'INDEX_MAX',
    'ParseFailure',
    'Record',
    'approx_equals',
    'parse_record',
]
