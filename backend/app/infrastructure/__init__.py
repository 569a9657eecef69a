"""
Infrastructure layer - external system integrations.
Keeps business logic clean from implementation details.
"""

from .storage_gateway import SQLAlchemyGateway, parse_record_id

__all__ = ['SQLAlchemyGateway', 'parse_record_id']
