"""
Shared base model for domain entities.

All entities serialize to camelCase JSON on the wire (``createdBy``,
``isShared``, ``fitnessGoals``) while Python code uses snake_case attributes.
Input accepts either spelling.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base class for domain entities with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_response(self) -> Dict[str, Any]:
        """Serialize for an HTTP response body."""
        return self.model_dump(mode="json", by_alias=True)
