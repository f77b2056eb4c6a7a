"""Configuration and graph file exceptions."""


class ConfigLoadError(Exception):
    """Raised when a YAML file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class ConfigValidationError(Exception):
    """Raised when loaded data fails validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)
