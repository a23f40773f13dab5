"""Custom exceptions for stencil-docx."""


class StencilDocxError(Exception):
    """Base exception for all stencil-docx errors."""

    pass


class ParseError(StencilDocxError):
    """Raised when component metadata cannot be loaded."""

    pass


class ConfigError(StencilDocxError):
    """Raised when a configuration file is missing or invalid."""

    pass
