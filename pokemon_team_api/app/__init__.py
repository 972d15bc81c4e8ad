"""
Application package initializer.

The project is organised into a few small layers: ``core`` holds
configuration and logging, ``schemas`` the Pydantic payload models,
``services`` the in‑memory collection store and ``api`` the HTTP
routes that call into it.
"""

from .main import app  # noqa: F401
