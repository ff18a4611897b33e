"""Helpers for safe debug logging.

Account data and room events can carry key material (secret storage keys,
encrypted payloads, device keys). This module redacts such fields and
shortens bulky values before they reach DEBUG logs.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "access_token",
        "refresh_token",
        "password",
        "passphrase",
        "private_key",
        "session_key",
        "key",
        "mac",
        "iv",
        "ciphertext",
        "encrypted",
    }
)

# Account data types whose whole content is secret material.
_SENSITIVE_PREFIXES: tuple[str, ...] = (
    "m.secret_storage.",
    "m.cross_signing.",
    "m.megolm_backup.",
)


def _is_sensitive(key: str) -> bool:
    lowered = key.lower()
    return lowered in _SENSITIVE_KEYS or lowered.startswith(_SENSITIVE_PREFIXES)


def redact_for_log(value: Any, *, max_string: int = 256, max_items: int = 20, _depth: int = 0) -> Any:
    """Return a redacted, size-bounded copy of *value* for debug logs."""
    if _depth > 10:
        return "<max-depth>"

    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}…<truncated>"

    if value is None or isinstance(value, (int, float, bool)):
        return value

    if isinstance(value, (bytes, bytearray)):
        return f"<bytes:{len(value)}b>"

    if isinstance(value, Mapping):
        return {
            str(k): "<redacted>"
            if _is_sensitive(str(k))
            else redact_for_log(v, max_string=max_string, max_items=max_items, _depth=_depth + 1)
            for k, v in value.items()
        }

    if isinstance(value, (list, tuple)):
        head = [redact_for_log(v, max_string=max_string, max_items=max_items, _depth=_depth + 1) for v in value[:max_items]]
        if len(value) > max_items:
            head.append(f"<+{len(value) - max_items} more>")
        return head

    return repr(value)
