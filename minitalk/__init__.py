"""Text messaging between processes over SIGUSR1 and SIGUSR2, with small string, formatting and line-reading helpers."""

__version__ = "0.1.0"