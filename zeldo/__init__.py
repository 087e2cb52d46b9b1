"""The Legend of Zeldo: a small top-down action role-playing game on pygame."""

__version__ = "0.1.0"