"""Dolby.io real-time streaming REST APIs."""

from dolbyio_rest_apis.streaming import director

__all__ = ["director"]
