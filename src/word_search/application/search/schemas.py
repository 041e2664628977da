from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, TypeAdapter, model_validator


class _Frame(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class StartedFrame(_Frame):
    status: Literal["started"]


class InfoFrame(_Frame):
    status: Literal["info"]
    message: str = ""
    total_files: Optional[NonNegativeInt] = Field(default=None, alias="totalFiles")


class ProgressFrame(_Frame):
    status: Literal["progress"]
    current_file: str = Field(default="", alias="currentFile")
    count: NonNegativeInt
    processed_files: NonNegativeInt = Field(alias="processedFiles")
    total_files: NonNegativeInt = Field(alias="totalFiles")

    @model_validator(mode="after")
    def _processed_within_total(self) -> "ProgressFrame":
        if self.total_files > 0 and self.processed_files > self.total_files:
            raise ValueError("processedFiles exceeds totalFiles")
        return self


class CompletedFrame(_Frame):
    status: Literal["completed"]
    word: str
    count: NonNegativeInt
    processed_files: NonNegativeInt = Field(alias="processedFiles")
    total_files: NonNegativeInt = Field(alias="totalFiles")


class ErrorFrame(_Frame):
    status: Literal["error"]
    message: str


StreamFrame = Annotated[
    Union[StartedFrame, InfoFrame, ProgressFrame, CompletedFrame, ErrorFrame],
    Field(discriminator="status"),
]

stream_frame_adapter: TypeAdapter[StreamFrame] = TypeAdapter(StreamFrame)
