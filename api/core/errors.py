"""
Error hierarchy for failures surfaced to API callers.

Every subclass collapses to the same response: status 500 with a generic
text body. The detail is only ever logged (see `main.py`).
"""

from __future__ import annotations


class ServiceError(RuntimeError):
    pass


class InputError(ServiceError):
    """
    Request parameters that could not be interpreted (e.g. malformed bounds).
    """


GENERIC_ERROR_MESSAGE = "Internal Server Error"
