"""Core mediaq functionality: IR, expression engine, emission, stylesheet expansion, config."""

from . import ir
from .config_loader import MediaqConfig, find_config, load_config
from .defaults import default_context
from .diagnostics import Diagnostics, ErrorPolicy
from .errors import (
    ConfigError,
    ErrorContext,
    ExpressionSyntaxError,
    MediaQueryError,
    StylesheetError,
    StylesheetStructureError,
    UnitError,
    UnknownBreakpointError,
    ValueTypeError,
)
from .renderer import render_block
from .stylesheet import process_file, process_stylesheet

__all__ = [
    "ir",
    "ConfigError",
    "Diagnostics",
    "ErrorContext",
    "ErrorPolicy",
    "ExpressionSyntaxError",
    "MediaQueryError",
    "MediaqConfig",
    "StylesheetError",
    "StylesheetStructureError",
    "UnitError",
    "UnknownBreakpointError",
    "ValueTypeError",
    "default_context",
    "find_config",
    "load_config",
    "process_file",
    "process_stylesheet",
    "render_block",
]
