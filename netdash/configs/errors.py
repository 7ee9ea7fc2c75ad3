"""Configuration-related exception classes for netdash."""


class ConfigError(Exception):
    """Base exception for configuration errors.

    All configuration-related exceptions inherit from this class,
    allowing for broad exception handling when needed.
    """


class ConfigFileNotFoundError(ConfigError):
    """Raised when config file cannot be found.

    This exception is raised when attempting to load a settings
    file that doesn't exist at the specified path.
    """


class ConfigParseError(ConfigError):
    """Raised when config file cannot be parsed.

    This exception is raised when a settings file exists but contains
    invalid YAML or does not hold a mapping at its top level.
    """


class ConfigTypeConversionError(ConfigError):
    """Raised when a config value cannot be converted to expected type.

    This exception is raised when a settings value fails validation
    (e.g., a negative poll interval or a non-numeric grid bound).
    """
