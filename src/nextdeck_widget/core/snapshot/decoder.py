"""
Snapshot decoding.

The shared store holds the snapshot either as raw bytes or as a string,
depending on how the host application wrote it. Both forms are decoded
into a Snapshot. Any failure yields None; nothing here raises.
"""

import logging

from pydantic import ValidationError

from nextdeck_widget.core.snapshot.models import Snapshot

logger = logging.getLogger(__name__)


def decode(raw: bytes | str | None) -> Snapshot | None:
    """
    Decode a raw snapshot payload.

    Strings are encoded to UTF-8 first and then decoded like bytes. The
    payload is validated in strict mode against the camelCase wire keys only
    (snake_case field names are rejected); a malformed payload yields None
    rather than a partially populated Snapshot.

    Args:
        raw: Payload read from the shared store, or None if absent

    Returns:
        Decoded Snapshot, or None if absent or malformed

    Example:
        >>> decode(None) is None
        True
        >>> decode(b"\\x00garbage") is None
        True
        >>> snapshot = decode('{"updatedAt": 1, "boards": [], "cards": []}')
        >>> snapshot.updated_at
        1
    """
    if raw is None:
        return None

    if isinstance(raw, str):
        try:
            data = raw.encode("utf-8")
        except UnicodeEncodeError as e:
            logger.warning(f"Snapshot string is not encodable as UTF-8: {e}")
            return None
    elif isinstance(raw, (bytes, bytearray, memoryview)):
        data = bytes(raw)
    else:
        logger.warning(f"Unsupported snapshot payload type: {type(raw).__name__}")
        return None

    try:
        snapshot = Snapshot.model_validate_json(
            data, strict=True, by_alias=True, by_name=False
        )
    except ValidationError as e:
        logger.warning(f"Discarding malformed snapshot ({e.error_count()} error(s))")
        logger.debug(f"Snapshot validation details: {e}")
        return None

    logger.debug(
        f"Decoded snapshot updated_at={snapshot.updated_at} with "
        f"{len(snapshot.boards)} board(s) and {len(snapshot.cards)} card(s)"
    )
    return snapshot


def encode(snapshot: Snapshot) -> bytes:
    """
    Encode a Snapshot into its wire format.

    This is the inverse of decode(): ``decode(encode(s)) == s`` for any
    valid snapshot.

    Args:
        snapshot: Snapshot to serialize

    Returns:
        UTF-8 encoded JSON with camelCase keys
    """
    return snapshot.model_dump_json(by_alias=True).encode("utf-8")
