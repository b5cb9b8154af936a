class ValidationError(ValueError):
    """Raised when a booking request is missing a required field."""
    pass


class DispatchError(RuntimeError):
    """Raised when one or more outbound messages could not be sent."""
    pass


class ConfigError(RuntimeError):
    """Raised at startup when required configuration is absent."""
    pass
