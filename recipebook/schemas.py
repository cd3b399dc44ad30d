import re
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

_INTEGER = re.compile(r"[+-]?[0-9]+")

# ids and minutes are stored as signed 64-bit SQLite integers
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse ASCII decimal digits with an optional sign into a 64-bit int.

    Returns None for anything else, including values out of range.
    """
    if value is None or not _INTEGER.fullmatch(value):
        return None
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        return None
    return number


def parse_prep_time(value: Optional[str]) -> int:
    """Lenient prep time policy: anything that is not an integer counts as 0.

    The form field is optional and free to type into, so a bad value never
    rejects the whole recipe.
    """
    number = parse_int((value or "").strip())
    return 0 if number is None else number


class RecipeBase(BaseModel):
    name: str = Field(..., json_schema_extra={"example": "Vanilla Bean"})
    ingredients: str = Field(
        "", json_schema_extra={"example": "2 cups heavy cream\n1 cup milk"}
    )
    instructions: str = Field(
        "",
        json_schema_extra={
            "example": "Heat cream and milk\nChurn in ice cream maker"
        },
    )
    prep_time: int = Field(0, json_schema_extra={"example": 45})


class RecipeCreate(RecipeBase):
    pass


class Recipe(RecipeBase):
    id: int
    prep_time: Optional[int] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
