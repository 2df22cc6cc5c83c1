from __future__ import annotations

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class ApiModel(BaseModel):
    """Response body using the same camelCase field names as the stored records."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
