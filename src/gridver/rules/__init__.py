"""
Grid Version Rules Module

- Version: Version parsing, ordering and latest-version selection
- Rule: Rule for version constraint handling

Usage:
    from gridver.rules import Rule, Version, parse, compare, select_latest
"""

from .version import Version, Ordering, parse, compare, select_latest
from .rule import Rule

__all__ = [
    'Rule',
    'Version',
    'Ordering',
    'parse',
    'compare',
    'select_latest',
]
