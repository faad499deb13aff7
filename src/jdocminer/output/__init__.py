"""Output of extraction results."""

from .printer import OutputPrinter, JsonOutputPrinter

__all__ = ['OutputPrinter', 'JsonOutputPrinter']
