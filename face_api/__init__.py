"""
Top‑level package for the Face Store API.

This file makes ``face_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``face_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
