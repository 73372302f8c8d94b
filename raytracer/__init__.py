"""Path tracer for spheres with diffuse, metallic and glass materials, writing BMP images."""

__version__ = "0.1.0"