"""Stable, device-unique hostnames derived from a MAC address."""

from __future__ import annotations

import re
from typing import Iterable, Union

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"
_SUFFIX_LENGTH = 5
_MAC_PATTERN = re.compile(r"^[0-9A-Fa-f]{2}([:-]?)(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}$")

MacLike = Union[str, bytes, bytearray, Iterable[int]]


def parse_mac(text: str) -> bytes:
    """Parse ``AA:BB:CC:DD:EE:FF`` (``:``, ``-`` or no separator) into six bytes."""
    text = text.strip()
    if not _MAC_PATTERN.match(text):
        raise ValueError(f"invalid MAC address: {text!r}")
    return bytes.fromhex(re.sub(r"[:-]", "", text))


def _mac_bytes(mac: MacLike) -> bytes:
    if isinstance(mac, str):
        return parse_mac(mac)
    data = bytes(mac)
    if len(data) != 6:
        raise ValueError(f"a MAC address has 6 bytes, got {len(data)}")
    return data


def mac_hash(mac: MacLike) -> int:
    """32-bit multiplicative hash (factor 31) over the six MAC bytes."""
    value = 0
    for byte in _mac_bytes(mac):
        value = (value * 31 + byte) & 0xFFFFFFFF
    return value


def unique_hostname(prefix: str, mac: MacLike) -> str:
    """``prefix`` plus a five-character base-36 suffix derived from ``mac``."""
    value = mac_hash(mac)
    suffix = []
    for _ in range(_SUFFIX_LENGTH):
        value, digit = divmod(value, len(_ALPHABET))
        suffix.append(_ALPHABET[digit])
    return f"{prefix}-{''.join(suffix)}"