"""Classic 2D raster graphics algorithms drawn onto an in-memory canvas."""

__version__ = "0.1.0"