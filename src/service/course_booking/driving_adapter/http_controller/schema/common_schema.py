"""
Response envelope shared by every JSON endpoint

    {"success": true, "message": "...", "data": ...}
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel


T = TypeVar('T')


class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data: Optional[T] = None

    @classmethod
    def ok(cls, data: Optional[T] = None, message: str = 'Success') -> 'ApiResponse[T]':
        return cls(success=True, message=message, data=data)
