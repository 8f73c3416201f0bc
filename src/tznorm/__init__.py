"""tznorm — timezone normalization for JSON payloads and time display."""

__version__ = "0.3.0"
