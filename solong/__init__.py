"""Map validation and XPM texture loading for a tile-based maze game."""

__version__ = "0.1.0"
__all__ = ["mapcheck", "wordtab", "colorvalue", "colornames", "xpm"]