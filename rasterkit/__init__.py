"""Software rasterisation toolkit: TGA images, drawing primitives, OBJ rendering and colour models."""

__version__ = "0.1.0"

__all__ = ["antialias", "cli", "colors", "geometry", "model", "raster", "render", "tga"]