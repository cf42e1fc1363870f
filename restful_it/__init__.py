"""Integration suite for the restful-api.dev objects API."""

__version__ = "0.1.0"
