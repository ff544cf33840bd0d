"""FireDesk API.

Multi-tenant fire-safety equipment dashboard backend: role and
institution scoped authorization plus append-only audit logging.
"""

__version__ = "0.1.0"
