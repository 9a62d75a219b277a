class GridverError(Exception):
    """Base exception for all application-specific errors."""

    pass


# --- 1. Errors related to reading versions and constraints ---
class ParseError(GridverError, ValueError):
    """Base class for errors raised while turning a string into a version."""

    pass


class NoMatchError(ParseError):
    """Raised when a string contains no recognizable `major.minor` pattern."""

    pass


class RuleError(GridverError, ValueError):
    """Raised when a version constraint string is malformed or unsupported."""

    pass


# --- 2. Errors related to listing payloads handed in by the caller ---
class ListingError(GridverError):
    """Raised when a release listing cannot be interpreted."""

    pass


# --- 3. Errors related to loading and parsing the configuration file ---
class ConfigurationError(GridverError):
    """Base class for errors encountered while finding, reading, or parsing config files."""

    pass


class ConfigFileMissingError(ConfigurationError):
    """Raised when the configuration file cannot be found."""

    pass


class ConfigParsingError(ConfigurationError):
    """Raised when a YAML configuration file is syntactically incorrect."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when the configuration fails structural validation (e.g., Pydantic)."""

    pass


class SourceNotFoundError(ConfigurationError):
    """Raised when a named release source is not configured."""

    pass
