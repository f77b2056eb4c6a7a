"""YAML loading for settings and graph files."""

from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from .document import GraphDocument
from .errors import ConfigLoadError, ConfigValidationError
from .settings import Settings

ModelT = TypeVar("ModelT", bound=BaseModel)


def load_yaml(path: str | Path) -> dict:
    """Load a YAML file and return the raw data.

    Args:
        path: Path to the YAML file.

    Returns:
        The parsed YAML data as a dictionary.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise ConfigLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise ConfigLoadError(f"Not a file: {path}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigLoadError(f"Cannot read file: {e}", str(path)) from e

    return _parse_mapping(text, str(path))


def _parse_mapping(text: str, path: str | None = None) -> dict:
    """Parse YAML text whose root must be a mapping; empty text gives {}."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigLoadError(f"Invalid YAML: {e}", path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Expected a mapping at the root, got {type(data).__name__}", path
        )
    return data


def parse_graph_file(path: str | Path) -> GraphDocument:
    """Load and parse a graph YAML file.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
        ConfigValidationError: If the data fails validation.
    """
    return _validate(GraphDocument, load_yaml(path))


def parse_graph_from_string(yaml_string: str) -> GraphDocument:
    """Parse a graph description from a YAML string."""
    return _validate(GraphDocument, _parse_mapping(yaml_string))


def load_settings(path: str | Path | None = None) -> Settings:
    """Load settings from a YAML file, or defaults when no path is given."""
    if path is None:
        return Settings()
    return _validate(Settings, load_yaml(path))


def parse_settings_from_string(yaml_string: str) -> Settings:
    """Parse settings from a YAML string."""
    return _validate(Settings, _parse_mapping(yaml_string))


def _validate(model: type[ModelT], data: dict) -> ModelT:
    """Validate raw data against a pydantic model.

    Raises:
        ConfigValidationError: If the data fails validation.
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(x) for x in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise ConfigValidationError(
            f"Validation failed with {len(errors)} error(s)", errors
        ) from e
