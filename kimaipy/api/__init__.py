"""Kimai API access for kimaiPy."""

from .client import KimaiClient

__all__ = ['KimaiClient']
