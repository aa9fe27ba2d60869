from pydantic import BaseModel, Field


class ItemText(BaseModel):
    text: str


class Reorder(BaseModel):
    from_index: int = Field(ge=0)
    to_index: int = Field(ge=0)
