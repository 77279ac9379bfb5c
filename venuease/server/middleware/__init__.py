"""
Middleware modules for the VenuEase server.

This package contains custom middleware for request timing and logging.
"""

from .request_monitoring import RequestMonitoringMiddleware

__all__ = ["RequestMonitoringMiddleware"]
