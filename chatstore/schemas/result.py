from enum import Enum
from typing import Optional
from pydantic import BaseModel

class StoreStatus(str, Enum):
    OK = "ok"
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    INVALID_CREDENTIALS = "invalid_credentials"
    EXECUTION_FAILED = "execution_failed"

class OperationResult(BaseModel):
    """Outcome of a write or verification; truthy only when ``status`` is OK."""
    status: StoreStatus
    detail: Optional[str] = None

    def __bool__(self) -> bool:
        return self.status is StoreStatus.OK

    @property
    def ok(self) -> bool:
        return bool(self)

    @classmethod
    def success(cls, detail: Optional[str] = None) -> "OperationResult":
        return cls(status=StoreStatus.OK, detail=detail)

    @classmethod
    def failure(cls, status: StoreStatus, detail: str) -> "OperationResult":
        return cls(status=status, detail=detail)
