from simplestream.transport.file import FileDocumentSource
from simplestream.transport.http import HttpDocumentSource

__all__ = [
    "FileDocumentSource",
    "HttpDocumentSource",
]
