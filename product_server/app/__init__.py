"""
Application package initializer.

The code is split into ``core`` (settings, logging, errors), ``api``
(routes), ``schemas`` (pydantic models) and ``services`` (the product
store).  ``main.create_app`` wires them together.
"""

from .main import app, create_app  # noqa: F401
