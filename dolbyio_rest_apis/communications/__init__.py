"""Dolby.io Communications REST APIs."""

from dolbyio_rest_apis.communications import recordings

__all__ = ["recordings"]
