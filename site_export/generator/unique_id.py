"""Per-instance identifiers for sections that carry their own scripts."""

from __future__ import annotations

import re
import secrets
import string
import time

SUFFIX_ALPHABET = string.digits + string.ascii_lowercase
SUFFIX_LENGTH = 9
UNIQUE_ID_PATTERN = re.compile(r"\b([A-Za-z][A-Za-z0-9]*)_\d{13,}_[0-9a-z]{9}\b")


def allocate_id(prefix: str) -> str:
    """Return ``{prefix}_{epoch_ms}_{suffix}`` for one generator invocation.

    No registry is kept; uniqueness relies on the millisecond timestamp plus a
    nine character base-36 random suffix. The result is safe to use both as an
    HTML id and inside CSS selectors.

    Examples
    --------
    >>> value = allocate_id("countdown")
    >>> bool(UNIQUE_ID_PATTERN.fullmatch(value))
    True
    """
    stamp = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"{prefix}_{stamp}_{suffix}"


def normalize_ids(html: str, placeholder: str = "{prefix}_ID") -> str:
    """Replace allocated identifiers in ``html`` with stable placeholders."""
    return UNIQUE_ID_PATTERN.sub(
        lambda match: placeholder.format(prefix=match.group(1)), html
    )


__all__ = ["UNIQUE_ID_PATTERN", "allocate_id", "normalize_ids"]
