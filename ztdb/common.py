"""Shared types, special values and word layouts of the ztdb binary formats."""

from __future__ import annotations

import enum
from dataclasses import dataclass

ZTDB_MAX = 0xFFFFFFFFFFFFFFFF
ZTDB_UNKNOWN = 0xFFFFFFFFFFFFFFFE
ZTDB_RANGE = 0xFFFFFFFFFFFFFFFD  # value does not fit in the variable

MAX_VAR_SIZE = 64
_OFFSET_BITS = 24
_OFFSET_MASK = (1 << _OFFSET_BITS) - 1
_SIZE_MASK = 0x3F
_TYPE_MASK = 0x3


class VarType(enum.IntEnum):
    """Kinds of variable; only DEFAULT is in use."""

    DEFAULT = 0
    RESERVED1 = 1
    RESERVED2 = 2
    RESERVED3 = 3


@dataclass(frozen=True)
class VarInfo:
    """One variable's entry in a var file: name offset, width in bits and type."""

    offset: int
    size: int
    var_type: VarType = VarType.DEFAULT


def pack_var_info(offset: int, size: int, var_type: VarType | int = VarType.DEFAULT) -> int:
    """Pack a variable entry into a 32-bit word (type:2, size:6, offset:24).

    A size of 64 is stored as 0.
    """
    if not 0 <= offset <= _OFFSET_MASK:
        raise ValueError(f"name offset {offset} does not fit in {_OFFSET_BITS} bits")
    if not 1 <= size <= MAX_VAR_SIZE:
        raise ValueError(f"variable size {size} is not between 1 and {MAX_VAR_SIZE}")
    kind = VarType(var_type)
    return (offset & _OFFSET_MASK) | ((size & _SIZE_MASK) << 24) | ((int(kind) & _TYPE_MASK) << 30)


def unpack_var_info(word: int) -> VarInfo:
    """Unpack a 32-bit variable entry word; a stored size of 0 means 64."""
    size = (word >> 24) & _SIZE_MASK
    return VarInfo(
        offset=word & _OFFSET_MASK,
        size=size or MAX_VAR_SIZE,
        var_type=VarType((word >> 30) & _TYPE_MASK),
    )


def pack_version(major: int, minor: int) -> int:
    """Pack a version into a 32-bit word: major in the high half, minor in the low."""
    for part in (major, minor):
        if not 0 <= part <= 0xFFFF:
            raise ValueError(f"version part {part} does not fit in 16 bits")
    return (major << 16) | minor


def unpack_version(word: int) -> tuple[int, int]:
    """Return (major, minor) from a 32-bit version word."""
    return (word >> 16) & 0xFFFF, word & 0xFFFF