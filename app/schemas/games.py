from datetime import datetime

from pydantic import AliasGenerator, BaseModel, Field
from pydantic.alias_generators import to_camel


class GameWrite(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str
    image_url: str = Field(..., min_length=1, max_length=1024)
    additional_images: list[str] = Field(default_factory=list)
    video_url: str | None = Field(default=None, max_length=1024)
    additional_videos: list[str] = Field(default_factory=list)
    categories: list[str]

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class GameOut(BaseModel):
    id: str
    title: str
    description: str
    image_url: str
    additional_images: list[str]
    video_url: str | None
    additional_videos: list[str]
    categories: list[str]
    created_at: datetime
    created_by: str | None
    created_by_name: str | None
    updated_at: datetime | None
    updated_by: str | None
    updated_by_name: str | None

    model_config = {"alias_generator": AliasGenerator(serialization_alias=to_camel), "from_attributes": True}
