"""
Data Access Layer Module Initialization
"""

from docrepo.repositories.base import BaseRepository
from docrepo.repositories.mongo import MongoRepository

__all__ = [
    "BaseRepository",
    "MongoRepository",
]
