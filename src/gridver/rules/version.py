from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import Iterable, Optional, Tuple, Union
import logging
import re

from ..exceptions import NoMatchError, ParseError

logger = logging.getLogger(__name__)


class Ordering(IntEnum):
    """
        Result of comparing two versions, usable as a classic cmp() value
    """
    LESS = -1
    EQUAL = 0
    GREATER = 1


# 1:Major, 2:Minor, 3:Patch, 4:Extra dotted fields, 5:Prerelease, 6:Build
SEMVER_REGEX = re.compile(
    r"(?P<major>0|[1-9]\d*)\."
    r"(?P<minor>0|[1-9]\d*)"
    r"(?:\.(?P<patch>0|[1-9]\d*)(?P<extra>(?:\.\d+)*))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
    r"(?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?"
)

# package rebuild marker, e.g. `1.2.3-r4`
REVISION_REGEX = re.compile(r"-r(\d+)(?![0-9A-Za-z])")


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """
        Class describe a version found inside an arbitrary string

        Ordering only looks at the numeric fields and the revision,
        prerelease and build metadata are carried along but never compared.
    """
    raw: str
    major: int
    minor: int
    patch: int = 0
    extra: Tuple[int, ...] = ()
    prerelease: Tuple[str, ...] = ()
    build: Optional[str] = None
    revision: int = 0
    text: str = ""

    @classmethod
    def parse(cls, raw: str) -> "Version":
        return parse(raw)

    @property
    def fields(self) -> Tuple[int, ...]:
        """Numeric fields taking part in ordering, revision excluded"""
        return (self.major, self.minor, self.patch) + self.extra

    def _key(self) -> Tuple[int, ...]:
        fields = list(self.fields)
        while len(fields) > 3 and fields[-1] == 0:
            fields.pop()
        return tuple(fields) + (self.revision,)

    def __eq__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Ordering.EQUAL

    def __lt__(self, other):
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.text

    def __repr__(self):
        return f"Version('{self.raw}')"


def _split_revision(raw: str) -> Tuple[str, int]:
    matches = list(REVISION_REGEX.finditer(raw))
    if not matches:
        return raw, 0
    last = matches[-1]
    # keep a gap so the text around the marker cannot join into one version
    return raw[:last.start()] + " " + raw[last.end():], int(last.group(1))


def parse(raw: str) -> Version:
    """
    Extract the first `major.minor[.patch][-prerelease][+build]` found in `raw`.

    A `-rNNN` suffix anywhere in the string is taken as the revision and
    removed before matching, so it never shows up as a prerelease.

    Raises:
        NoMatchError: when `raw` holds no `major.minor` pattern
    """
    if not isinstance(raw, str):
        raise ParseError(f"Expected a string to parse, got {type(raw).__name__}")

    stripped, revision = _split_revision(raw)
    match = SEMVER_REGEX.search(stripped)
    if not match:
        raise NoMatchError(f"Unrecognized Version '{raw}'")

    parts = match.groupdict()
    extra = tuple(int(x) for x in parts['extra'].split('.')[1:]) if parts['extra'] else ()
    prerelease = tuple(parts['prerelease'].split('.')) if parts['prerelease'] else ()
    text = match.group(0)
    if revision:
        text = f"{text}-r{revision}"

    return Version(
        raw=raw,
        major=int(parts['major']),
        minor=int(parts['minor']),
        patch=int(parts['patch'] or 0),
        extra=extra,
        prerelease=prerelease,
        build=parts['build'],
        revision=revision,
        text=text,
    )


def compare(a: Union[Version, str], b: Union[Version, str]) -> Ordering:
    """
    Order two versions field by field.

    Fields are major, minor, patch, any further dotted numeric fields (the
    shorter side padded with zeros) and finally the revision.
    """
    raw_a = a.raw if isinstance(a, Version) else a
    raw_b = b.raw if isinstance(b, Version) else b
    if raw_a == raw_b:
        return Ordering.EQUAL

    va = a if isinstance(a, Version) else parse(a)
    vb = b if isinstance(b, Version) else parse(b)

    fa, fb = list(va.fields), list(vb.fields)
    length = max(len(fa), len(fb))
    fa += [0] * (length - len(fa))
    fb += [0] * (length - len(fb))
    fa.append(va.revision)
    fb.append(vb.revision)

    for x, y in zip(fa, fb):
        if x > y:
            return Ordering.GREATER
        if x < y:
            return Ordering.LESS
    return Ordering.EQUAL


def select_latest(candidates: Iterable[str], constraint=None) -> Optional[Version]:
    """
    Pick the newest version out of `candidates`.

    Candidates that fail to parse, or fall outside the optional `constraint`
    rule, are skipped. On ties the earlier candidate wins.
    Returns None when no candidate qualifies.
    """
    best: Optional[Version] = None
    for candidate in candidates:
        try:
            version = parse(candidate)
        except ParseError as e:
            logger.debug(f"Skipping candidate {candidate!r}: {e}")
            continue

        if constraint is not None and version not in constraint:
            logger.debug(f"Skipping candidate {candidate!r}: outside rule '{constraint}'")
            continue

        if best is None or compare(version, best) is Ordering.GREATER:
            best = version

    if best is None:
        logger.debug("No suitable version found among candidates")
    else:
        logger.debug(f"Selected latest version {best.text} from {best.raw!r}")
    return best
