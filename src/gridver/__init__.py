"""
Grid Version

Version parsing and selection for browser drivers and the Selenium server.

Main modules:
- rules: Version parsing, ordering, latest-version selection and constraint rules
- listing: Helpers over release listings fetched by the caller
- config: Configuration of named release sources
- utils: Utility functions

Quick start example:
```python
from gridver import select_latest, release_dir

best = select_latest(["chromedriver_2.1.zip", "chromedriver_2.10.zip", "chromedriver_2.9.zip"])
print(best.text, release_dir(best))   # 2.10 2.10
```
"""

from .rules import Version, Ordering, Rule, parse, compare, select_latest
from .listing import scan_listing, tag_names, release_dir, find_cached, is_cache_current
from .config import Config, ConfigModel, SourceModel
from .exceptions import (
    GridverError,
    ParseError,
    NoMatchError,
    RuleError,
    ListingError,
    ConfigurationError,
    ConfigFileMissingError,
    ConfigParsingError,
    ConfigValidationError,
    SourceNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    '__version__',
    # Rules
    'Version',
    'Ordering',
    'Rule',
    'parse',
    'compare',
    'select_latest',
    # Listing
    'scan_listing',
    'tag_names',
    'release_dir',
    'find_cached',
    'is_cache_current',
    # Config
    'Config',
    'ConfigModel',
    'SourceModel',
    # Exceptions
    'GridverError',
    'ParseError',
    'NoMatchError',
    'RuleError',
    'ListingError',
    'ConfigurationError',
    'ConfigFileMissingError',
    'ConfigParsingError',
    'ConfigValidationError',
    'SourceNotFoundError',
]
