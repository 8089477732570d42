from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

# 공통 schema

T = TypeVar("T")


# api 응답 envelope (성공/실패 공통)
class ApiResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data: Optional[T] = None

    @classmethod
    def ok(cls, message: str, data=None) -> "ApiResponse":
        return cls(success=True, message=message, data=data)

    @classmethod
    def error(cls, message: str, data=None) -> "ApiResponse":
        return cls(success=False, message=message, data=data)


# 삭제 / join / leave 처럼 payload 없는 응답
class MessageResponse(BaseModel):
    success: bool = True
    message: str
