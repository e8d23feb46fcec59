from pydantic import BaseModel, field_validator
from typing import Optional

class Movie(BaseModel):
    id: Optional[str] = None
    title: Optional[str] = None
    director: Optional[str] = None
    rating: Optional[int] = None

    class Config:
        # Descriptive fields beyond these pass through untouched
        extra = "allow"

    @field_validator("id", mode="before")
    @classmethod
    def id_as_string(cls, value):
        # Clients may send numeric ids
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
