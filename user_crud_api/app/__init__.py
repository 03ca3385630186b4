"""
Application package initializer.

The service is split into the record model (``schemas``), the
data-access layer (``services``), the HTTP handlers (``api``) and the
ambient pieces shared by all of them (``core``).  Routers are grouped
under ``api/<version>/`` so a future version can be mounted beside
the current one.
"""

from .main import app  # noqa: F401
