"""Shared pydantic configuration for leanlens records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class LeanLensModel(BaseModel):
    """Immutable record that persists with camelCase keys.

    Field names are snake_case in Python; the serialized form uses the
    camelCase keys of the stored assessment format. Either spelling is
    accepted on input. Sequence fields are tuples, so a record cannot be
    changed in place after validation.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
