"""
ID number hashing.

ID numbers are hashed with a keyed HMAC-SHA256 before a caller stores them,
so persisted verification records never hold the raw number.
"""

from __future__ import annotations

import hashlib
import hmac
import re

from idverify.core.settings import app_settings

_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def _clean_id(id_number: str) -> str:
    return _NON_ALNUM.sub("", id_number).lower()


def hash_id_number(id_number: str | None, salt: str | None = None) -> str | None:
    """
    Hash an ID number using HMAC-SHA256.

    Args:
      id_number: Raw ID number; spaces, dashes and case are ignored.
      salt: HMAC key; defaults to ``IDVERIFY_ID_HASH_SALT``.

    Returns:
      Hex digest, or None for an empty ID number.
    """
    if not id_number:
        return None
    key = salt if salt is not None else app_settings.ID_HASH_SALT.get_secret_value()
    return hmac.new(
        key.encode("utf-8"), _clean_id(id_number).encode("utf-8"), hashlib.sha256
    ).hexdigest()


def verify_id_hash(
    raw_id_number: str | None, stored_hash: str | None, salt: str | None = None
) -> bool:
    """Return True if ``raw_id_number`` hashes to ``stored_hash``."""
    if not raw_id_number or not stored_hash:
        return False
    calculated = hash_id_number(raw_id_number, salt=salt)
    return calculated is not None and hmac.compare_digest(calculated, stored_hash)
