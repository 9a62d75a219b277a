"""
Helpers that work on release listings the caller has already fetched.

Nothing here touches the network or the file system: text goes in, candidate
names or decisions come out.
"""

import json
import logging
import re
from typing import Iterable, List, Optional, Union

from .rules.version import Version, Ordering, compare, parse
from .exceptions import ListingError, ParseError

logger = logging.getLogger(__name__)


def scan_listing(text: str, pattern: Union[str, re.Pattern]) -> List[str]:
    """
    Return every non-overlapping match of `pattern` in `text`.

    Whole matches are returned even when the pattern has groups, which is
    what `grep -o` would print for the same listing.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    found = [m.group(0) for m in regex.finditer(text)]
    logger.debug(f"Pattern '{regex.pattern}' matched {len(found)} entries in listing")
    return found


def tag_names(payload: str) -> List[str]:
    """
    Pull `tag_name` values out of a GitHub releases JSON document.

    Accepts a single release object (`/releases/latest`) or a list of them.
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise ListingError(f"Release payload is not valid JSON: {e}") from e

    releases = data if isinstance(data, list) else [data]
    tags = []
    for release in releases:
        if isinstance(release, dict) and isinstance(release.get("tag_name"), str):
            tags.append(release["tag_name"])
    if not tags:
        logger.warning("Release payload contains no 'tag_name' entries")
    return tags


def release_dir(version: Union[Version, str]) -> str:
    """`MAJOR.MINOR` path component used by the selenium release bucket"""
    if isinstance(version, str):
        version = parse(version)
    return f"{version.major}.{version.minor}"


def find_cached(version: Union[Version, str], names: Iterable[str]) -> Optional[str]:
    """
    Return the first cached artifact name holding the same version, or None.
    """
    for name in names:
        try:
            cached = parse(name)
        except ParseError:
            continue
        if compare(cached, version) is Ordering.EQUAL:
            logger.debug(f"Cache hit for {version}: '{name}'")
            return name
    logger.debug(f"Cache miss for {version}")
    return None


def is_cache_current(names: Iterable[str], latest: Union[Version, str]) -> bool:
    """
    True when some cached artifact is at least as new as `latest`.
    """
    for name in names:
        try:
            cached = parse(name)
        except ParseError:
            continue
        if compare(cached, latest) is not Ordering.LESS:
            return True
    return False
