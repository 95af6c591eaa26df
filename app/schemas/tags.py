from datetime import datetime

from pydantic import AliasGenerator, BaseModel, Field
from pydantic.alias_generators import to_camel


class TagWrite(BaseModel):
    name: str = Field(..., min_length=1, max_length=128)
    group: str | None = Field(default=None, max_length=128)
    description: str | None = None

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class TagOut(BaseModel):
    id: str
    name: str
    group: str | None
    description: str | None
    created_at: datetime
    created_by: str | None
    created_by_name: str | None
    updated_at: datetime | None
    updated_by: str | None
    updated_by_name: str | None

    model_config = {"alias_generator": AliasGenerator(serialization_alias=to_camel), "from_attributes": True}


class TagGroupOut(BaseModel):
    group: str | None
    tags: list[TagOut]
