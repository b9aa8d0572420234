"""
MongoDB Repository Implementation Module Initialization
"""

from crud_backend.repositories.mongo.document_repo import MongoDocumentRepository

__all__ = [
    "MongoDocumentRepository",
]
