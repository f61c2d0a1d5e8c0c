"""
Middleware package for the engagement metrics API.

Cross-cutting request logging and error handling.
"""

from .error_handling import ErrorHandlingMiddleware, publish_error_handler
from .logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "publish_error_handler",
]
