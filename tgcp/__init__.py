"""Terminal styling, widgets and resource models for Google Cloud resources."""

__version__ = "0.1.0"