"""
deployment/ - HTTP surface
"""

from .api import create_fastapi_app, status_for, CompareRequest

__all__ = [
    "create_fastapi_app",
    "status_for",
    "CompareRequest",
]
