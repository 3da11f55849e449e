"""Per-profile file encryption with NaCl boxes."""

__version__ = "1.0.0"
