from __future__ import annotations

from typing import Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr


class AmpValue(BaseModel):
    """Body of a PATCH request. The value is tried as a string first, then as a boolean."""
    value: Union[StrictStr, StrictBool] = Field(union_mode="left_to_right")

    def as_text(self) -> str:
        if isinstance(self.value, bool):
            return "on" if self.value else "off"
        return self.value


class State(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    power: bool | None = None
    speaker_a: bool | None = Field(None, alias="speakerA")
    speaker_b: bool | None = Field(None, alias="speakerB")
    mute: bool | None = None
    source: str | None = None
    model: str | None = None
    volume: str | None = None

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    status: int
    message: str
