"""Reading and writing var files: the list of variables with their widths and names.

Layout, in little-endian 32-bit words:

    0x0000  version (16-bit major, 16-bit minor), currently 1.0
    0x0004  number of variables
    0x0008  offset of the name strings
    0x000C  one word per variable: type:2, size:6 (64 stored as 0), name offset:24
    ...     NUL-terminated names
"""

from __future__ import annotations

import os
import struct
from typing import Iterable

from .common import VarType, pack_var_info, pack_version, unpack_var_info, unpack_version
from .var import Var

VERSION = (1, 0)
_WORD = struct.Struct("<I")
_HEADER = struct.Struct("<III")


class VarFileError(Exception):
    """Raised when var file data cannot be encoded or decoded."""


def encode_vars(vars: Iterable[Var]) -> bytes:
    """Serialise variables into var file bytes."""
    var_list = list(vars)
    names = []
    for var in var_list:
        encoded = var.name.encode("utf-8")
        if b"\0" in encoded:
            raise VarFileError(f"variable name {var.name!r} contains a NUL character")
        names.append(encoded + b"\0")

    offset_start = _HEADER.size + len(var_list) * _WORD.size
    out = bytearray(_HEADER.pack(pack_version(*VERSION), len(var_list), offset_start))

    offset = offset_start
    for var, name in zip(var_list, names):
        try:
            word = pack_var_info(offset, var.size, VarType.DEFAULT)
        except ValueError as exc:
            raise VarFileError(str(exc)) from exc
        out += _WORD.pack(word)
        offset += len(name)

    for name in names:
        out += name
    return bytes(out)


def decode_vars(data: bytes) -> list[Var]:
    """Parse var file bytes into variables (without samples)."""
    if len(data) < _HEADER.size:
        raise VarFileError("var file is too short for its header")
    version_word, count, _names_start = _HEADER.unpack_from(data, 0)
    version = unpack_version(version_word)
    if version != VERSION:
        raise VarFileError(
            f"version {version[0]}.{version[1]} is not supported, expected {VERSION[0]}.{VERSION[1]}"
        )
    if len(data) < _HEADER.size + count * _WORD.size:
        raise VarFileError(f"var file is too short for {count} variable entries")

    vars = []
    for index in range(count):
        (word,) = _WORD.unpack_from(data, _HEADER.size + index * _WORD.size)
        info = unpack_var_info(word)
        if info.offset > len(data):
            raise VarFileError(f"name offset {info.offset} lies past the end of the data")
        end = data.find(b"\0", info.offset)
        raw = data[info.offset:] if end < 0 else data[info.offset:end]
        try:
            name = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise VarFileError(f"variable name at offset {info.offset} is not valid UTF-8") from exc
        vars.append(Var(name, info.size))
    return vars


def write_vars(path: str | os.PathLike[str], vars: Iterable[Var]) -> None:
    """Write variables to a var file."""
    data = encode_vars(vars)
    with open(path, "wb") as handle:
        handle.write(data)


def read_vars(path: str | os.PathLike[str]) -> list[Var]:
    """Read variables from a var file."""
    with open(path, "rb") as handle:
        return decode_vars(handle.read())