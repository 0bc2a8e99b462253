"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  The store lives in ``services``, the wire models in
``schemas`` and the HTTP routes in ``api/endpoints``.
"""

from .main import app  # noqa: F401
