"""Upload local files into ABAP BSP containers."""

__version__ = "0.1.0"
