"""Write schemas for page layouts and page-builder operations."""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class SectionIn(BaseModel):
    """
    One stored section. Either shape is accepted:
    {enabled, config} (legacy) or {visible, props}.
    """
    id: str = Field(min_length=1)
    type: str = Field(min_length=1)
    order: int = 0
    enabled: Optional[bool] = None
    config: Optional[Dict[str, Any]] = None
    visible: Optional[bool] = None
    props: Optional[Dict[str, Any]] = None


class LayoutSave(BaseModel):
    sections: List[SectionIn]


class AddSection(BaseModel):
    op: Literal["add"]
    type: str = "hero"


class SelectSection(BaseModel):
    op: Literal["select"]
    id: Optional[str] = None


class UpdateProps(BaseModel):
    op: Literal["update_props"]
    id: str
    props: Dict[str, Any]


class UpdateType(BaseModel):
    op: Literal["update_type"]
    id: str
    type: str = Field(min_length=1)


class ToggleVisible(BaseModel):
    op: Literal["toggle_visible"]
    id: str


class Reorder(BaseModel):
    op: Literal["reorder"]
    id: str
    index: int = Field(ge=0)


class DeleteSection(BaseModel):
    op: Literal["delete"]
    id: str


LayoutOperation = Annotated[
    Union[AddSection, SelectSection, UpdateProps, UpdateType, ToggleVisible, Reorder, DeleteSection],
    Field(discriminator="op"),
]


class LayoutPatch(BaseModel):
    operations: List[LayoutOperation] = Field(min_length=1)
