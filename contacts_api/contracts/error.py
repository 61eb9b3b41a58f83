"""
Contract for error responses.
"""

from typing import Optional

from .base import BaseContract


class ErrorResponse(BaseContract):
    title: str
    message: str
    stackTrace: Optional[str] = None
