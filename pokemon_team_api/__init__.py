"""
Top‑level package for the Pokemon Team API.

This file makes ``pokemon_team_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``pokemon_team_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
