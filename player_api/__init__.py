"""Player Registry API.

A REST service managing player records with:
- Filterable, sortable, paginated listings
- Server-side validation on create and update
- Level progression derived from experience

Usage:
    ./start_server.py  # From repo root
"""

from .server import app

__all__ = ['app']
