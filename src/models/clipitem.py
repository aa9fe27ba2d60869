from typing import Container

from pydantic import BaseModel, ConfigDict, field_validator
from ulid import ULID


class ClipItem(BaseModel):
    """A single stored snippet. Ids never change once assigned."""
    model_config = ConfigDict(frozen=True)

    id: str
    text: str = ""

    @field_validator("text", mode="before")
    @classmethod
    def _null_text(cls, value):
        return "" if value is None else value

    def with_text(self, text: str) -> "ClipItem":
        return self.model_copy(update={"text": text})


def clean_text(text: str) -> str:
    # Lone surrogates (undecodable argv bytes) cannot be stored as UTF-8.
    text = text.encode("utf-8", "surrogatepass").decode("utf-8", "replace")
    return text.rstrip()


def new_item_id(existing: Container[str] = ()) -> str:
    # ULIDs are time ordered with 80 random bits; the loop only guards against
    # a collision with an id that is already live.
    while True:
        item_id = f"c_{ULID()}"
        if item_id not in existing:
            return item_id
