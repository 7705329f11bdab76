"""typst-templatr -- manage a personal library of Typst templates."""

__version__ = '0.1.0'
