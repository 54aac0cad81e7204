"""Configuration error type."""


class ConfigError(ValueError):
    """Raised when rule options or a config file cannot be turned into a config."""

    def __init__(self, message: str, option: str | None = None):
        self.option = option
        super().__init__(f"{option}: {message}" if option else message)
