"""Data module - Loading and saving graphs."""

from .loader import GraphLoader

__all__ = ['GraphLoader']
