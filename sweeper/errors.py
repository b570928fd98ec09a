# sweeper/errors.py


class ConfigurationError(ValueError):
    """Raised for impossible board settings (non-positive size, too many mines, unknown level)."""
