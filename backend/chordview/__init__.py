"""Chord diagram layout engine, renderer and raster export."""

__version__ = "0.1.0"
