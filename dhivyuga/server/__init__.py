"""
Dhivyuga Server Package.

This package contains the web server implementation for the Dhivyuga
mantra catalog.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    services: Request dependencies and auth security helpers.
    middleware: Request logging and timing.
    exception_handlers: Conversion of unhandled errors into JSON responses.
"""
