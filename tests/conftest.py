"""Shared fixtures: compiled catalogs written on the fly."""

import array
import struct
from pathlib import Path

import pytest

MO_MAGIC = 0x950412DE
CATALOG_HEADER = (
    "Content-Type: text/plain; charset=UTF-8\n"
    "Plural-Forms: nplurals=2; plural=(n != 1);\n"
)


def write_mo(path: Path, messages: dict[str, str]) -> Path:
    """
    Write a GNU .mo catalog.

    Keys are raw message ids: `context + "\\x04" + msgid` for contextual
    entries and `singular + "\\0" + plural` for plural entries. Plural
    translations join their forms with "\\0".
    """
    entries = {"": CATALOG_HEADER, **messages}
    keys = sorted(k.encode("utf-8") for k in entries)
    values = {k.encode("utf-8"): v.encode("utf-8") for k, v in entries.items()}

    ids = strs = b""
    offsets = []
    for key in keys:
        offsets.append((len(ids), len(key), len(strs), len(values[key])))
        ids += key + b"\0"
        strs += values[key] + b"\0"

    key_start = 7 * 4 + 16 * len(keys)
    value_start = key_start + len(ids)
    key_offsets = []
    value_offsets = []
    for id_offset, id_length, str_offset, str_length in offsets:
        key_offsets += [id_length, id_offset + key_start]
        value_offsets += [str_length, str_offset + value_start]

    output = struct.pack(
        "<Iiiiiii", MO_MAGIC, 0, len(keys), 7 * 4, 7 * 4 + len(keys) * 8, 0, 0
    )
    table = array.array("i", key_offsets + value_offsets)
    if struct.pack("=i", 1) != struct.pack("<i", 1):
        table.byteswap()
    output += table.tobytes() + ids + strs

    path.write_bytes(output)
    return path


SPANISH_MESSAGES = {
    "Hello": "Hola",
    "Save": "Salvar",
    "menu\x04Save": "Guardar",
    "one item\x00%d items": "un elemento\x00%d elementos",
    "menu\x04one file\x00%d files": "un archivo\x00%d archivos",
}


@pytest.fixture
def catalog_file(tmp_path):
    """A small Spanish catalog with plain, contextual and plural entries."""
    return write_mo(tmp_path / "es_ES.mo", SPANISH_MESSAGES)


@pytest.fixture
def cache_dir(tmp_path):
    path = tmp_path / "cache"
    path.mkdir()
    return path
