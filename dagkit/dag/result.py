"""Outcome of a graph mutation attempt."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ValidationResult(BaseModel):
    """Result of adding, removing or replacing graph elements.

    Topology problems (cycles, duplicates, missing vertices) are reported
    through this value instead of being raised.
    """

    model_config = ConfigDict(frozen=True)

    successful: bool = Field(..., description="Whether the operation succeeded")
    message: Optional[str] = Field(None, description="Reason for a failure")

    @classmethod
    def success(cls) -> "ValidationResult":
        return _SUCCESS

    @classmethod
    def failure(cls, message: str) -> "ValidationResult":
        return cls(successful=False, message=message)

    def __bool__(self) -> bool:
        return self.successful


_SUCCESS = ValidationResult(successful=True, message=None)
