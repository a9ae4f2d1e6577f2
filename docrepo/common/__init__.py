"""
Common Utilities Module Initialization
"""

from docrepo.common.errors import AppError, InvalidIdentifierError, NotFoundError

__all__ = [
    "AppError",
    "InvalidIdentifierError",
    "NotFoundError",
]
