"""Common error levels, error codes and the packed error-number layout.

An error number is a signed 32-bit value laid out as::

    | 1 | APP_ID (7 bits) | MOD_ID (8 bits) | LEVEL (3 bits) | ERR_ID (13 bits) |
"""

from __future__ import annotations

from enum import IntEnum

APPID = 0x80000000 + 0x20000000

_MODULE_BITS = 8
_LEVEL_BITS = 3
_ERRID_BITS = 13


class ErrLevel(IntEnum):
    """Severity of an error number."""

    DEBUG = 0
    INFO = 1
    NOTICE = 2
    WARNING = 3
    ERROR = 4
    CRIT = 5
    ALERT = 6
    FATAL = 7


class ErrCode(IntEnum):
    """Error identifiers shared by every module; private codes start above BUTT."""

    INVALID_DEVID = 1
    INVALID_CHNID = 2
    ILLEGAL_PARAM = 3
    EXIST = 4
    UNEXIST = 5
    NULL_PTR = 6
    NOT_CONFIG = 7
    NOT_SUPPORT = 8
    NOT_PERM = 9
    INVALID_PIPEID = 10
    INVALID_STITCHGRPID = 11
    NOMEM = 12
    NOBUF = 13
    BUF_EMPTY = 14
    BUF_FULL = 15
    NOTREADY = 16
    BADADDR = 17
    BUSY = 18
    SIZE_NOT_ENOUGH = 19
    DEV_EXIST = 20
    DEV_UNEXIST = 21
    PIPE_EXIST = 22
    PIPE_UNEXIST = 23
    GROUP_EXIST = 24
    GROUP_UNEXIST = 25
    BUTT = 63


def _check_field(name: str, value: int, bits: int) -> int:
    value = int(value)
    if not 0 <= value < 1 << bits:
        raise ValueError(f"{name} must fit in {bits} bits, got {value}")
    return value


def def_err(module: int, level: int, errid: int) -> int:
    """Pack a module id, level and error id into a signed 32-bit error number."""
    module = _check_field("module", module, _MODULE_BITS)
    level = _check_field("level", level, _LEVEL_BITS)
    errid = _check_field("errid", errid, _ERRID_BITS)
    raw = APPID | (module << 16) | (level << 13) | errid
    return raw - (1 << 32) if raw & 0x80000000 else raw