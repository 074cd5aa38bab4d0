from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Единый конверт ответа API"""
    success: bool = True
    message: str
    data: Optional[DataT] = None
    errors: Optional[List[Any]] = None
