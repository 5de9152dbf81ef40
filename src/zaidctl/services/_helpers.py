"""Shared service-layer helper functions."""

from __future__ import annotations


def mask_id(id_number: str | None, visible: int = 3) -> str:
    """Mask all but the last *visible* characters of an ID for logging.

    Examples:
        >>> mask_id("8001315009087")
        '**********087'
        >>> mask_id(None)
        ''
    """
    if not id_number:
        return ""
    text = id_number.strip()
    if len(text) <= visible:
        return "*" * len(text)
    return "*" * (len(text) - visible) + text[-visible:]
