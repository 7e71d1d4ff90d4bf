"""lps - selective pacman upgrade picker."""

__version__ = "0.1.0"
