"""
FastAPI dependencies for validating submitted forms
"""
import logging
from typing import Any, Callable, Coroutine, Dict, Union

from fastapi import Body, HTTPException

from ..config import get_settings
from ..schemas.common import ValidationErrorResponse
from ..validation import FormValidationError, Schema, get_schema

logger = logging.getLogger(__name__)


def validated_form(
    schema: Union[Schema, str],
) -> Callable[..., Coroutine[Any, Any, Dict[str, Any]]]:
    """
    Build a dependency that validates the request body against a form schema

    Args:
        schema: Schema instance or registered schema name

    Returns:
        Dependency returning the normalized record

    Raises:
        UnknownSchemaError: If the schema name is not registered
    """
    if isinstance(schema, str):
        schema = get_schema(schema)

    async def dependency(record: Dict[str, Any] = Body(...)) -> Dict[str, Any]:
        result = schema.validate(record)
        try:
            return result.raise_for_errors()
        except FormValidationError:
            logger.info(
                "Rejected %s form submission, invalid fields: %s",
                schema.name, ", ".join(result.errors)
            )
            echo = record if get_settings().debug else None
            response = ValidationErrorResponse.from_result(result, echo)
            raise HTTPException(status_code=422, detail=response.model_dump(mode="json"))

    return dependency
