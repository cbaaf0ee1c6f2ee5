class ComplexityCLIError(Exception):
    """Base exception for all Complexity CLI errors."""

    pass


class ConfigurationError(ComplexityCLIError):
    """Raised when configuration is invalid or missing."""

    pass


class InputError(ComplexityCLIError):
    """Raised when source input cannot be read."""

    pass


class ValidationError(ComplexityCLIError):
    """Raised when input validation fails."""

    pass
