"""Comment payload decoding.

SQL dumps produced by older Chinese tooling frequently store COMMENT text in
GBK/Big5 rather than UTF-8. Payloads are recovered here before they reach
the registry.
"""
from __future__ import annotations


# Tried in order once UTF-8 fails
FALLBACK_ENCODINGS: tuple[str, ...] = ("gbk", "big5", "gb18030")


def decode_comment(
    data: bytes | str,
    encodings: tuple[str, ...] = FALLBACK_ENCODINGS
) -> str:
    """Decode a comment payload into readable text.

    Args:
        data: Raw payload. Text produced by a ``surrogateescape`` decode is
              converted back to its original bytes first.
        encodings: Legacy encodings to try after UTF-8

    Returns:
        Decoded text. If no encoding fits, the original bytes are returned
        verbatim (as ``surrogateescape`` text); this never raises.
    """
    if isinstance(data, str):
        raw = data.encode("utf-8", errors="surrogateescape")
    else:
        raw = data

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        pass

    for encoding in encodings:
        try:
            return raw.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            continue

    return raw.decode("utf-8", errors="surrogateescape")
