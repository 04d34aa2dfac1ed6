"""Media type helpers for Gemtext responses.

Gemini servers announce Gemtext as ``text/gemini``, optionally with
parameters such as ``charset`` and ``lang``. Parameters are parsed with the
standard library's header parser.

Example:
    >>> is_gemtext("text/gemini; charset=utf-8")
    True
    >>> charset("text/gemini; charset=ISO-8859-1")
    'iso-8859-1'

"""

from __future__ import annotations

from email.message import Message

GEMTEXT_MIME = "text/gemini"
DEFAULT_CHARSET = "utf-8"


def _header(media_type: str) -> Message:
    msg = Message()
    msg["content-type"] = media_type
    return msg


def essence(media_type: str) -> str:
    """Lower-cased ``type/subtype`` without parameters."""
    return media_type.partition(";")[0].strip().lower()


def is_gemtext(media_type: str) -> bool:
    """True if ``media_type`` is ``text/gemini`` (case-insensitive)."""
    return essence(media_type) == GEMTEXT_MIME


def charset(media_type: str) -> str:
    """The ``charset`` parameter, lower-cased, or ``utf-8`` if absent."""
    value = _header(media_type).get_param("charset")
    if not value or not isinstance(value, str):
        return DEFAULT_CHARSET
    return value.lower()


def lang(media_type: str) -> str | None:
    """The ``lang`` parameter (a comma-separated list of language tags), if any."""
    value = _header(media_type).get_param("lang")
    return value if isinstance(value, str) and value else None


__all__ = ["DEFAULT_CHARSET", "GEMTEXT_MIME", "charset", "essence", "is_gemtext", "lang"]
