from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..common.datetime_utils import parse_iso_date
from ..core.constants import MAX_AMOUNT

# strict=True: no bool -> int, no str -> number coercion


class DailyWorkCreateIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    employee_id: int = Field(gt=0, strict=True)
    work_date: date = Field(alias="date")
    kgs_cleaned: float = Field(ge=0, le=MAX_AMOUNT, strict=True)
    # Omitted -> computed from the per-kg rate
    earnings: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT, strict=True)

    @field_validator("work_date", mode="before")
    @classmethod
    def _iso_date_string(cls, value: Any) -> date:
        if not isinstance(value, str):
            raise ValueError("date must be a string in YYYY-MM-DD format")
        try:
            return parse_iso_date(value.strip())
        except ValueError:
            raise ValueError("date must be a string in YYYY-MM-DD format")


class DailyWorkUpdateIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)

    entry_id: int = Field(alias="id", gt=0, strict=True)
    kgs_cleaned: float = Field(ge=0, le=MAX_AMOUNT, strict=True)
    earnings: Optional[float] = Field(default=None, ge=0, le=MAX_AMOUNT, strict=True)


class DailyWorkDeleteIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    entry_id: int = Field(alias="id", gt=0, strict=True)
