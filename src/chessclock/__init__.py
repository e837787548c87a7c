"""chessclock — a two-player chess clock engine with Qt and terminal front-ends."""

__version__ = "1.0.0"
