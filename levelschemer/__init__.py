"""Nuclear level schemes: data model, text-format parser, PDF/SVG rendering and a command line."""

__version__ = "0.1.0"
__all__ = ["cli", "parser", "renderer", "scheme"]