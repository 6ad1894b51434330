"""
ambari_discovery.tier1_runtime.validate
─────────────────────────────────────────
Input/schema validation via Pydantic v2. Raises the package ValidationError
(not raw Pydantic errors) so callers always see one error shape.
"""
from __future__ import annotations

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from ambari_discovery.tier0_core.errors import ValidationError

T = TypeVar("T", bound=BaseModel)


def validate_input(model: Type[T], data: Any) -> T:
    """
    Validate raw data against a Pydantic model.
    Raises ambari_discovery ValidationError (not Pydantic's) on failure.

    Usage:
        class ComponentDocument(BaseModel):
            service: str
            hosts: list[str] = []

        component = validate_input(ComponentDocument, raw["components"]["NAMENODE"])
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        fields = {
            ".".join(str(loc) for loc in err["loc"]): err["msg"]
            for err in exc.errors()
        }
        raise ValidationError(
            code="validation_error",
            user_message=f"{model.__name__} validation failed.",
            fields=fields,
        ) from exc


__sdk_export__ = {
    "exports": ["validate_input"],
    "description": "Pydantic v2 input validation with a stable error shape",
    "tier": "tier1_runtime",
    "module": "validate",
}
