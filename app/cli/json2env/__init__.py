"""Flatten JSON documents into shell-style environment variable assignments."""

__version__ = "0.2.0"
