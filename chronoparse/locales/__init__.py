"""Locale packages. Each provides parsers, refiners and ready-made Chrono instances."""
