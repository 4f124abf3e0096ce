"""Models, sample data, theme tokens and widget logic for a desktop chat client."""

__version__ = "0.1.0"