"""Word frequencies, a ring buffer, the Game of Life, WAV processing and typed CSV reading."""

__version__ = "0.1.0"