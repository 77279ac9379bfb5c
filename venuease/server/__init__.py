"""
VenuEase Server Package.

This package contains the web server implementation for the VenuEase platform.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Server configuration and constants.
    middleware: Request monitoring middleware.
    exception_handlers: Mapping of errors to JSON error responses.
"""
