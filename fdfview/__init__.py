"""Reading .fdf height maps, with the text, byte, list and formatting helpers they use."""

__version__ = "0.1.0"