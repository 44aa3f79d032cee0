"""ATLYSS support for the mod manager."""

from .extension import AtlyssExtension, main

__all__ = ['AtlyssExtension', 'main']
