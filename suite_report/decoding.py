"""Percent-decoding of posted form values."""

import locale
import logging
from collections.abc import Sequence
from urllib.parse import unquote_plus

log = logging.getLogger(__name__)


def default_encoding() -> str:
    """Return the host's preferred text encoding."""
    return locale.getpreferredencoding(False)


def decode(value: str, encoding: str | None = None) -> str:
    """Percent-decode a form value.

    Args:
        value: Raw form-encoded value ("+" stands for a space)
        encoding: Charset of the escaped bytes, host default when None

    Returns:
        The decoded value, or ``value`` unchanged if the encoding is unknown

    """
    if encoding is None:
        encoding = default_encoding()
    try:
        # also rejects registered non-text codecs such as base64
        b"".decode(encoding)
    except LookupError:
        log.warning("Unsupported encoding %r, leaving value undecoded", encoding)
        return value
    return unquote_plus(value, encoding=encoding)


def decode_all(values: Sequence[str], encoding: str | None = None) -> list[str]:
    """Decode every value, preserving order."""
    return [decode(value, encoding) for value in values]
