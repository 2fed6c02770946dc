"""Agentic Studio: topic prompt to published video."""

__version__ = "0.1.0"
