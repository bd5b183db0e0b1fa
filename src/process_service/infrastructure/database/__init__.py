"""Database infrastructure package."""

from .client import DatabaseClient, get_db_client
from .models import Base, ProcessDB

__all__ = ["DatabaseClient", "get_db_client", "Base", "ProcessDB"]
