"""Dictionary-based cracking of MD5, SHA-1 and SHA-256 hashes."""

__version__ = "0.1.0"

__all__ = ["cli", "cracker", "display", "errors", "hashers"]