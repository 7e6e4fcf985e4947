from __future__ import annotations

import base64
import binascii
import json
from typing import Any

from jwt import DecodeError


def encode_segment(value: dict[str, Any]) -> str:
    """Serialize a mapping to compact JSON and base64-encode it (standard alphabet)."""
    raw = json.dumps(value, separators=(",", ":")).encode("utf-8")
    return base64.b64encode(raw).decode("ascii")


def decode_segment(segment: str) -> dict[str, Any]:
    try:
        raw = base64.b64decode(segment.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as error:
        raise DecodeError(f"Invalid segment padding or characters: {error}") from error
    try:
        value = json.loads(raw)
    except ValueError as error:
        raise DecodeError(f"Invalid segment JSON: {error}") from error
    if not isinstance(value, dict):
        raise DecodeError("Segment must be a JSON object")
    return value


def split_token(token: str) -> tuple[str, str, str]:
    """Split a token into its header, payload and signature segments."""
    if not isinstance(token, str):
        raise DecodeError("Token must be a string")
    parts = token.split(".")
    if len(parts) != 3:
        raise DecodeError("Not enough segments" if len(parts) < 3 else "Too many segments")
    header, payload, signature = parts
    return header, payload, signature


def get_unverified_header(token: str) -> dict[str, Any]:
    """Return the decoded header without checking the signature."""
    header, _, _ = split_token(token)
    return decode_segment(header)


def decode_unverified(token: str) -> dict[str, Any]:
    """Return the decoded claims without checking the signature or lifetime."""
    _, payload, _ = split_token(token)
    return decode_segment(payload)
