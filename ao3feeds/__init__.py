"""Follow Archive of Our Own tag feeds from the terminal and download works as PDF files."""

__version__ = "1.0.0"

__all__ = ["__version__"]