"""
Error body returned for every domain failure.
"""

from typing import Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    code: str
    field: Optional[str] = None
    message: str
