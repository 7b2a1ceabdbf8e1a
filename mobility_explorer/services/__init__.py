"""
Services package for the Mobility Explorer
"""

from .data_service import DataStore, load_document
from .explorer_service import ExplorerService

__all__ = [
    "DataStore",
    "load_document",
    "ExplorerService"
]
