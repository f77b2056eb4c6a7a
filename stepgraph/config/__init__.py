"""Configuration layer: settings and graph files loaded from YAML."""

from .document import EdgeSpec, GraphDocument, NodeSpec
from .errors import ConfigLoadError, ConfigValidationError
from .loader import (
    load_settings,
    load_yaml,
    parse_graph_file,
    parse_graph_from_string,
    parse_settings_from_string,
)
from .settings import DEFAULT_REFRESH_TEXT, ELEMENT_SIZE, Settings

__all__ = [
    "EdgeSpec",
    "GraphDocument",
    "NodeSpec",
    "ConfigLoadError",
    "ConfigValidationError",
    "load_settings",
    "load_yaml",
    "parse_graph_file",
    "parse_graph_from_string",
    "parse_settings_from_string",
    "DEFAULT_REFRESH_TEXT",
    "ELEMENT_SIZE",
    "Settings",
]
