"""
Database module for the Companies service
"""

from .connection import get_async_session, get_engine, get_session, init_database

__all__ = ["get_async_session", "get_engine", "get_session", "init_database"]
