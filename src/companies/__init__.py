"""
Companies GraphQL service
Company records exposed through a GraphQL API backed by SQLAlchemy
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
