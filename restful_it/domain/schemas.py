from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, StrictStr


class ObjectIn(BaseModel):
    name: str
    data: Optional[dict[str, Any]] = None


class ObjectPatch(BaseModel):
    name: Optional[str] = None
    data: Optional[dict[str, Any]] = None


class ObjectSummaryOut(BaseModel):
    """Item of ``GET /objects``; catalogue entries may have ``data: null``."""

    model_config = ConfigDict(extra="allow")

    id: StrictStr
    name: StrictStr
    data: Optional[dict[str, Any]] = None


class ObjectOut(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: StrictStr
    name: StrictStr
    data: dict[str, Any]


class ObjectCreatedOut(ObjectOut):
    createdAt: Optional[StrictStr] = None


class ObjectUpdatedOut(ObjectOut):
    updatedAt: Optional[StrictStr] = None


class DeletedOut(BaseModel):
    message: str


class ErrorOut(BaseModel):
    error: str
