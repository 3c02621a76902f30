"""Persistent mapping of tag identifiers to category numbers."""

import logging
import struct
from os import PathLike
from pathlib import Path
from typing import Dict, Mapping, Tuple, Union

from tagwatch.reader import TagId

logger = logging.getLogger(__name__)

TAGS_FILE = "tags.bin"
_RECORD = struct.Struct("<QIB")

_Root = Union[str, "PathLike[str]"]


def encode_tags(tags: Mapping[Tuple[int, int], int]) -> bytes:
    """Serialise tags as little-endian records (high, low, category) in key order."""
    records = sorted((TagId(*key), value) for key, value in tags.items())
    try:
        return b"".join(_RECORD.pack(tag.high, tag.low, value) for tag, value in records)
    except struct.error as exc:
        raise ValueError(f"cannot encode tag record: {exc}") from exc


def read_tags(root: _Root) -> Dict[TagId, int]:
    """Load the stored tags below ``root``; an absent file yields an empty mapping."""
    path = Path(root) / TAGS_FILE
    if not path.exists():
        logger.info("Tags file does not exist")
        return {}
    data = path.read_bytes()
    if len(data) % _RECORD.size:
        raise ValueError(f"{path}: truncated tag record")
    return {TagId(high, low): value for high, low, value in _RECORD.iter_unpack(data)}


def write_tags(root: _Root, tags: Mapping[Tuple[int, int], int]) -> None:
    """Replace the stored tags below ``root`` with ``tags``."""
    data = encode_tags(tags)
    path = Path(root) / TAGS_FILE
    if path.exists():
        logger.info("Removing existing tags file")
        path.unlink()
    path.write_bytes(data)