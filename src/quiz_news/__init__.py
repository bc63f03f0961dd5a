"""Quiz News: fetch a JSON news feed and present it."""

__version__ = "0.1.0"
