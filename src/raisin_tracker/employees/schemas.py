from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EmployeeCreateIn(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
