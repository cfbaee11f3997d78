"""Field-survey land-cover normalization pipeline."""

__version__ = "0.1.0"
