from __future__ import annotations

"""Domain-specific exceptions for the option store and HTTP layers.

The exposure core never raises these; routers catch them and translate them
to appropriate HTTP responses.
"""


class NotFoundError(Exception):
    """Content type is not registered (maps to HTTP 404)."""


class ConfigurationError(Exception):
    """Settings hold a value the service cannot act on (e.g. unknown option backend)."""


class OptionStoreError(Exception):
    """Option storage backend failed after retries; startup cannot load preferences."""
