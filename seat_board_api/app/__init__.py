"""
Application package initializer.

This package contains the main entrypoint for the API and its
subpackages: ``core`` (configuration, logging, errors, SQLite
plumbing), ``stores`` (seat store backends), ``services`` (booking
logic), ``schemas`` (request and response models) and ``api`` (HTTP
routes).
"""

from .main import app  # noqa: F401
