"""Promo codes: format checks and deep-link encoding."""

from __future__ import annotations

import base64
import binascii
import re
from typing import Optional

PROMO_START_PARAM_PREFIX = "promo-"

_PROMO_CODE_FORMAT = re.compile(r"[a-zA-Z0-9_\-]{4,16}")
_URL_SAFE_ALPHABET = re.compile(r"[A-Za-z0-9_\-]*")

_CHATS_WORDS = {1: "чате"}
_CHATS_WORD_DEFAULT = "чатах"


def is_valid_promo_code(code: str) -> bool:
    """Tell whether the text looks like a promo code."""
    return _PROMO_CODE_FORMAT.fullmatch(code) is not None


def _encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def encode_promo_start_param(code: str) -> str:
    """Build the start parameter of a deep link that activates the code."""
    return f"{PROMO_START_PARAM_PREFIX}{_encode(code.encode('utf-8'))}"


def decode_promo_code(encoded: str) -> str:
    """Decode unpadded URL-safe base64 into a promo code.

    Raises ValueError for malformed input or text that is not UTF-8.
    """
    if _URL_SAFE_ALPHABET.fullmatch(encoded) is None or len(encoded) % 4 == 1:
        raise ValueError(f"invalid base64 value: {encoded!r}")
    padded = encoded + "=" * (-len(encoded) % 4)
    try:
        data = base64.b64decode(padded, altchars=b"-_", validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 value: {encoded!r}") from exc
    if _encode(data) != encoded:
        raise ValueError(f"invalid trailing bits in base64 value: {encoded!r}")
    return data.decode("utf-8")


def decode_promo_start_param(param: str) -> Optional[str]:
    """Return the promo code of a start parameter, or None if it carries none."""
    if not param.startswith(PROMO_START_PARAM_PREFIX):
        return None
    return decode_promo_code(param[len(PROMO_START_PARAM_PREFIX):])


def _check_count(count: int) -> int:
    if count < 0:
        raise ValueError(f"the number of chats cannot be negative: {count}")
    return count


def chats_in_russian(count: int) -> str:
    """Return the Russian word for 'chats' agreeing with the count."""
    return _CHATS_WORDS.get(_check_count(count), _CHATS_WORD_DEFAULT)


def success_suffix(chats_affected: int) -> str:
    """Pick the message variant for the number of chats affected."""
    if _check_count(chats_affected) > 1:
        return "plural"
    return "singular"