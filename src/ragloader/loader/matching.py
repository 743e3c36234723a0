"""
URL rule matching: which extraction rules apply to a given URL.

Two independent predicates are composed here:

* ``match_domain`` tests a URL against a domain wildcard of the form
  ``[scheme://]host[:port][/path]``. Omitted parts match anything and ``*``
  matches any run of characters, dots included, so ``*.example.com``
  matches ``docs.example.com`` and ``a.b.example.com`` but not
  ``example.com``. Scheme and host compare case-insensitively.
* ``match_path`` tests the URL path against a rule glob using shell
  conventions: ``*`` stays within one path segment, ``**`` crosses
  segments, ``{a,b}`` expands, ``[...]`` is a character class, ``!`` negates
  and ``*`` does not match a leading dot.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import List, Mapping, Sequence
from urllib.parse import urlsplit

import structlog
from wcmatch import fnmatch, glob

from ragloader.config.config import ExtractionRule

from .models import ResolvedSelector

logger = structlog.get_logger(__name__)

PATH_GLOB_FLAGS = glob.GLOBSTAR | glob.BRACE | glob.EXTGLOB | glob.NEGATE | glob.NEGATEALL | glob.FORCEUNIX
WILDCARD_FLAGS = fnmatch.FORCEUNIX | fnmatch.IGNORECASE
URL_PATH_FLAGS = fnmatch.FORCEUNIX


@dataclass(slots=True, frozen=True)
class DomainPattern:
    """A parsed domain wildcard."""

    host: str
    scheme: str | None = None
    port: str | None = None
    path: str | None = None

    @classmethod
    def parse(cls, pattern: str) -> DomainPattern:
        rest = pattern.strip()
        scheme = None
        if "://" in rest:
            scheme, rest = rest.split("://", 1)

        path = None
        slash = rest.find("/")
        if slash >= 0:
            rest, path = rest[:slash], rest[slash:]

        port = None
        if ":" in rest:
            rest, port = rest.rsplit(":", 1)

        return cls(host=rest, scheme=scheme or None, port=port or None, path=path or None)


@lru_cache(maxsize=1024)
def domain_pattern(pattern: str) -> DomainPattern:
    """Parsed form of a domain key, computed once per distinct key."""
    return DomainPattern.parse(pattern)


def match_domain(url: str, pattern: str) -> bool:
    """Whether ``url`` falls under the domain wildcard ``pattern``."""
    try:
        parts = urlsplit(url.strip())
        host = parts.hostname
    except ValueError:
        return False
    if not host:
        return False

    domain = domain_pattern(pattern)
    if not domain.host or not fnmatch.fnmatch(host, domain.host, flags=WILDCARD_FLAGS):
        return False
    if domain.scheme and not fnmatch.fnmatch(parts.scheme, domain.scheme, flags=WILDCARD_FLAGS):
        return False
    if domain.port:
        try:
            port = parts.port
        except ValueError:
            return False
        if port is None or not fnmatch.fnmatch(str(port), domain.port, flags=URL_PATH_FLAGS):
            return False
    if domain.path and not fnmatch.fnmatch(parts.path or "/", domain.path, flags=URL_PATH_FLAGS):
        return False
    return True


def match_path(path: str, pattern: str) -> bool:
    """Whether ``path`` matches the rule glob ``pattern``."""
    return glob.globmatch(path, pattern, flags=PATH_GLOB_FLAGS)


def url_path(url: str) -> str:
    """Path component of an absolute URL, or the raw string when it is not one."""
    try:
        parts = urlsplit(url)
        parts.port  # raises on an out-of-range or non-numeric port
    except ValueError:
        return url
    if not parts.scheme or not parts.netloc:
        return url
    return parts.path or "/"


def resolve_selectors(url: str, rule_set: Mapping[str, Sequence[ExtractionRule]]) -> List[ResolvedSelector]:
    """
    Resolve the selectors applicable to ``url``.

    Args:
        url: Source URL of the document
        rule_set: Domain wildcard -> ordered extraction rules

    Returns:
        Selectors in domain declaration order, then rule order. Empty when
        nothing matches; defaulting is the caller's concern.
    """
    path = url_path(url)
    selectors: List[ResolvedSelector] = []

    for domain, rules in rule_set.items():
        if not match_domain(url, domain):
            continue
        for rule in rules:
            if match_path(path, rule.pattern):
                selectors.append(ResolvedSelector(selector=rule.content_selector, multiple=rule.all))

    logger.debug("Resolved selectors", url=url, path=path, selectors=[s.selector for s in selectors])
    return selectors
