"""
Catalog component - Port interfaces.
"""

from src.ports.repo import ServiceRepoPort

__all__ = ["ServiceRepoPort"]
