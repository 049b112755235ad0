"""
Base schemas for all models.

Input schemas pass caller strings through unchanged. JSON-LD output
schemas use camelCase aliases and omit absent fields when serialized.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base for caller-supplied schemas.

    Features:
        - Validate on attribute assignment
        - Allow plain objects (from_attributes)
    """
    model_config = ConfigDict(
        from_attributes=True,
        validate_assignment=True
    )


class JsonLdSchema(BaseModel):
    """
    Base for Schema.org output records.

    Python attributes are snake_case; the wire format is camelCase with
    "@"-prefixed keywords declared as explicit aliases.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_json_ld(self) -> dict[str, Any]:
        """JSON-compatible dict with aliases, absent fields omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, **kwargs: Any) -> str:
        """JSON string with aliases, absent fields omitted."""
        return self.model_dump_json(by_alias=True, exclude_none=True, **kwargs)
