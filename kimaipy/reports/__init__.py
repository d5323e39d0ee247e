"""Output modules for kimaiPy."""

from .measurement import Measurement
from .list_printer import ListPrinter, OutputOptions

__all__ = ['Measurement', 'ListPrinter', 'OutputOptions']
