"""Shared helpers for property services: address parsing, geo and polylines, PostgreSQL arrays and placeholders, and HTTP response utilities."""

__version__ = "0.1.0"