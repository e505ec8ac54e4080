"""
Top-level package for the Product Server.

All functionality lives in submodules under ``app``; see
``product_server.app.main`` for the application factory.
"""

__all__ = []
