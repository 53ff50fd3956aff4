"""HTTP middleware: request timeout and request/correlation IDs.

Applied in main app; order matters (first added = outermost).
Import and use from app.main.
"""

from app.middleware.request_context import RequestContextMiddleware
from app.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestContextMiddleware",
    "TimeoutMiddleware",
]
