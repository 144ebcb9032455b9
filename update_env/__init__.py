"""Command-line editing of KEY=VALUE environment files."""

__version__ = "1.0.0"
