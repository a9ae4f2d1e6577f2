"""
Domain Model Module Initialization
"""

from docrepo.domain.document import Document, DocumentModel
from docrepo.domain.insert_record import InsertRecord

__all__ = [
    "Document",
    "DocumentModel",
    "InsertRecord",
]
