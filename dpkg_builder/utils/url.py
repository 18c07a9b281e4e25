"""URL resolution and path-segment helpers."""

import re
import urllib.parse

from dpkg_builder.errors import ParseError

# Characters a path segment may carry unescaped besides the always-safe
# unreserved set ("_.-~" and alphanumerics).
_PATH_SEGMENT_SAFE = "$&+:=@"

_CONTROL_CHAR_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def index_url(package: str, base: str) -> str:
    """
    Build the index-page URL for *package* under the distribution *base*.

    The name is escaped as a single path segment, so ``/``, ``;``, ``,``
    and ``?`` are percent-encoded while ``+`` (as in ``g++``) is kept.
    """
    if not base.endswith("/"):
        base += "/"
    return base + urllib.parse.quote(package, safe=_PATH_SEGMENT_SAFE)


def _parse_reference(href: str) -> urllib.parse.SplitResult:
    if _CONTROL_CHAR_RE.search(href):
        raise ParseError(f"invalid control character in URL {href!r}")
    if _BAD_ESCAPE_RE.search(href):
        raise ParseError(f"invalid URL escape in {href!r}")
    try:
        return urllib.parse.urlsplit(href)
    except ValueError as exc:
        raise ParseError(f"error parsing URL {href!r}: {exc}") from exc


def is_absolute(href: str) -> bool:
    """Return True when *href* carries a scheme."""
    return bool(_parse_reference(href).scheme)


def resolve_url(href: str, base: str) -> str:
    """
    Return *href* as an absolute URL.

    Absolute hrefs come back unchanged; relative ones are resolved against
    *base* using standard RFC 3986 reference resolution (``..``, ``.``,
    query strings and fragments included).

    Raises ParseError when *href* is not a valid URL reference.
    """
    if is_absolute(href):
        return href
    _parse_reference(base)
    return urllib.parse.urljoin(base, href)


def url_filename(url: str) -> str:
    """
    Return the final segment of *url*'s decoded path (text after the last
    ``/``).

    Raises ParseError when the path ends in ``/`` and so names no file, or
    when the decoded name carries a control character (e.g. ``%00``).
    """
    path = urllib.parse.unquote(_parse_reference(url).path)
    name = path.rsplit("/", 1)[-1]
    if not name:
        raise ParseError(f"URL {url!r} has no file name")
    if _CONTROL_CHAR_RE.search(name):
        raise ParseError(f"invalid control character in file name {name!r}")
    return name
