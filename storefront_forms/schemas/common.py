"""
Error response schemas rendered to callers of the form endpoints.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, Field

from ..validation import ErrorCode, ValidationResult


class ValidationErrorDetail(BaseModel):
    """Individual validation error detail."""
    field: str = Field(..., description="Field that failed validation")
    code: ErrorCode = Field(..., description="Kind of failure")
    message: str = Field(..., description="Error message")
    input_value: Optional[Any] = Field(None, description="Value that caused the error")


class ValidationErrorResponse(BaseModel):
    """Response schema for validation errors."""
    error: str = Field("validation_error", description="Error type")
    message: str = Field(..., description="Human-readable error message")
    details: List[ValidationErrorDetail] = Field(..., description="Detailed validation errors")

    @classmethod
    def from_result(cls, result: ValidationResult, record: Optional[dict] = None) -> "ValidationErrorResponse":
        """
        Flatten a rejected result into one detail per violated constraint.

        Args:
            result: Rejected validation result
            record: Submitted record; when given, offending values are echoed back
        """
        details = [
            ValidationErrorDetail(
                field=field,
                code=error.code,
                message=error.message,
                input_value=record.get(field) if record is not None else None,
            )
            for field, errors in result.errors.items()
            for error in errors
        ]
        return cls(
            message=f"The {result.form.replace('_', ' ')} form has {len(result.errors)} invalid field(s).",
            details=details,
        )
