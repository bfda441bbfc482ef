"""
Application package initializer.

The service is split into ``core`` (configuration, logging, database
helpers and errors), ``schemas`` (the ``Todo`` model), ``services``
(the store contract and its backends) and ``api`` (HTTP routes).
"""

from .main import app, create_app  # noqa: F401
