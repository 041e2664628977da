from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class FileItemResponse(BaseModel):
    name: str
    size_formatted: str = Field(default="", alias="sizeFormatted")

    model_config = ConfigDict(populate_by_name=True)


class ListFilesResponse(BaseModel):
    files: List[FileItemResponse] = Field(default_factory=list)
