"""
HTTP routes consumed by the dashboard front-end.
"""

from .routes import router

__all__ = ["router"]
