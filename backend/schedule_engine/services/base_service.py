"""
Base service class.
Services hold the engine's business rules and talk to the data source.
"""

from abc import ABC


class BaseService(ABC):
    """Base service class for all services."""
    pass
