class InvalidArgumentError(ValueError):
    """Raised when a value object is built or parsed from an invalid argument."""
