"""Command-line utilities, ciphers, a JSON document model and design-pattern examples."""

__version__ = "0.1.0"