"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings and logging), ``schemas`` (pydantic
models), ``services`` (the employee store) and ``api`` (versioned
routers).
"""

from .main import app  # noqa: F401
