"""
Database Module Initialization
"""

from docrepo.db.mongo import close_mongo, get_mongo, init_mongo

__all__ = [
    "init_mongo",
    "close_mongo",
    "get_mongo",
]
