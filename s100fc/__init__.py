"""Reader for S-100 feature catalogues and the definitions they hold."""

__version__ = "0.1.0"