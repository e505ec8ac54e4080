"""
API package containing the route table.

``router.py`` exposes a top-level ``router`` that includes the
endpoint modules under ``endpoints``, and ``deps.py`` holds the
dependencies those endpoints share.
"""
