"""Absolute URL validation for link targets.

The lexer only needs to know whether a link target is an absolute URL. This
module answers that with ``urllib.parse`` plus the checks urlsplit leaves
out: a well-formed scheme, a host for the schemes that require one, a valid
port and no forbidden host characters. The host is percent-decoded before
that last check, so ``https://ex%41mple.com`` is absolute.

Special-scheme URLs must spell out their authority: ``http:/foo`` has no
host and is therefore a relative target, although a WHATWG parser would
repair it to ``http://foo/``.

Example:
    >>> url = parse_url("gemini://example.com/test/?q=1")
    >>> url.scheme, url.host, url.query
    ('gemini', 'example.com', 'q=1')
    >>> parse_url("/root-relative/link")
    Traceback (most recent call last):
        ...
    tejat.errors.UrlError: relative URL without a base: '/root-relative/link'

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import SplitResult, unquote, urlsplit

from tejat.errors import UrlError

# RFC 3986 section 3.1
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:")

# Schemes whose URLs must carry a non-empty host
SPECIAL_SCHEMES = frozenset({"ftp", "http", "https", "ws", "wss"})

GEMINI_SCHEME = "gemini"

_FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r#%/:<>?@[\\]^|")


@dataclass(frozen=True, slots=True)
class Url:
    """A validated absolute URL.

    Equality and hashing use the serialized form, the string the URL was
    parsed from.
    """

    serialization: str
    parts: SplitResult = field(compare=False, repr=False)

    def __str__(self) -> str:
        return self.serialization

    @property
    def scheme(self) -> str:
        return self.parts.scheme

    @property
    def host(self) -> str | None:
        return self.parts.hostname

    @property
    def port(self) -> int | None:
        return self.parts.port

    @property
    def username(self) -> str | None:
        return self.parts.username

    @property
    def password(self) -> str | None:
        return self.parts.password

    @property
    def path(self) -> str:
        return self.parts.path

    @property
    def query(self) -> str:
        return self.parts.query

    @property
    def fragment(self) -> str:
        return self.parts.fragment

    @property
    def has_authority(self) -> bool:
        return self.serialization[len(self.scheme) + 1 :].startswith("//")


def parse_url(text: str) -> Url:
    """Parse ``text`` as an absolute URL.

    Raises:
        UrlError: If ``text`` is relative or malformed.
    """
    if not _SCHEME_RE.match(text):
        raise UrlError("relative URL without a base", text)

    try:
        parts = urlsplit(text)
    except ValueError as e:
        raise UrlError(str(e), text) from e

    if parts.netloc:
        host = parts.netloc.rpartition("@")[2]
        if not host.startswith("["):
            host = host.partition(":")[0]
            if any(c in _FORBIDDEN_HOST_CHARS for c in unquote(host)):
                raise UrlError("invalid international domain name", text)

    if parts.scheme in SPECIAL_SCHEMES and not parts.hostname:
        raise UrlError("empty host", text)

    try:
        parts.port
    except ValueError as e:
        raise UrlError("invalid port number", text) from e

    return Url(text, parts)


@dataclass(frozen=True, slots=True)
class GeminiUrl:
    """An absolute URL that is usable as a Gemini request target."""

    url: Url

    def __str__(self) -> str:
        return str(self.url)

    @classmethod
    def from_url(cls, url: Url) -> GeminiUrl:
        """Validate ``url`` as a Gemini URL.

        Raises:
            UrlError: If the scheme is not ``gemini``, the authority or host
                is missing, or the URL carries userinfo.
        """
        if url.scheme != GEMINI_SCHEME:
            raise UrlError(f"not a gemini URL (scheme {url.scheme!r})", str(url))
        if not url.has_authority:
            raise UrlError("missing authority", str(url))
        if not url.host:
            raise UrlError("missing host", str(url))
        if url.username or url.password is not None:
            raise UrlError("userinfo is not allowed", str(url))
        return cls(url)

    @classmethod
    def parse(cls, text: str) -> GeminiUrl:
        """Parse and validate ``text`` as a Gemini URL."""
        return cls.from_url(parse_url(text))


__all__ = ["GEMINI_SCHEME", "SPECIAL_SCHEMES", "GeminiUrl", "Url", "parse_url"]
