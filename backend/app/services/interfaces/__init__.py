"""
Service interfaces for dependency inversion.
Allows swapping storage engines without changing validation logic.
"""

from .storage import StorageGateway

__all__ = ['StorageGateway']
