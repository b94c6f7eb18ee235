"""
Base model for request bodies.

Bodies arrive in camelCase; handlers work with snake_case field names.
Fields are typed ``Any`` at this layer: the model only whitelists and
renames keys. Type and range checks belong to domain validation, which the
use cases run after authentication, lookup and ownership checks. A wrong
type must not turn into a 400 before a 401, 404 or 403.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def from_body(cls, payload: Any):
        """Build from a raw JSON body. Anything but an object counts as empty."""
        return cls.model_validate(payload if isinstance(payload, dict) else {})

    def sent_fields(self) -> Dict[str, Any]:
        """Only the fields present in the request body, keyed by snake_case name."""
        return self.model_dump(exclude_unset=True)
