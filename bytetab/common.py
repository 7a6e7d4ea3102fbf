# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------

class ArgumentError(Exception):
    USAGE_MSG = "Run the app with '--help' argument to see the usage"


class OutOfRangeError(IndexError):
    """Slice bounds (offset, count or capacity) do not fit the sequence."""


class InvalidStateError(RuntimeError):
    """Operation is not valid in the current state of the object."""


def verify_offset_and_count(length: int, offset: int, count: int, offset_name: str = 'offset', count_name: str = 'count'):
    if offset < 0:
        raise OutOfRangeError(f'{offset_name} is negative: {offset}')
    if count < 0:
        raise OutOfRangeError(f'{count_name} is negative: {count}')
    if offset + count > length:
        raise OutOfRangeError(f'{count_name} exceeds available length: {offset}+{count} > {length}')
