"""
Write schemas for the admin content surfaces.

Each entity has a Create model (required fields enforced) and an Update
model (every field optional; only fields sent by the client are applied).
"""

from datetime import date
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, List, Literal, Optional

from dateutil.parser import isoparse
from pydantic import BaseModel, BeforeValidator, EmailStr, Field


def _parse_date(value):
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return isoparse(value).date()
    return value


LooseDate = Annotated[date, BeforeValidator(_parse_date)]
OptionalDate = Annotated[Optional[date], BeforeValidator(_parse_date)]


class ProjectLinks(BaseModel):
    demo: Optional[str] = None
    github: Optional[str] = None


class ProjectCreate(BaseModel):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: str = Field(min_length=1)
    long_description: Optional[str] = None
    image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    links: ProjectLinks = Field(default_factory=ProjectLinks)
    featured: bool = False
    category: str = Field(min_length=1)
    visible: bool = True


class ProjectUpdate(BaseModel):
    nullable: ClassVar[FrozenSet[str]] = frozenset({"long_description", "image"})

    title: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    long_description: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[List[str]] = None
    links: Optional[ProjectLinks] = None
    featured: Optional[bool] = None
    category: Optional[str] = None
    visible: Optional[bool] = None
    order: Optional[int] = None


class SkillCreate(BaseModel):
    name: str = Field(min_length=1)
    icon: Optional[str] = None
    image_url: Optional[str] = None
    category: str = Field(min_length=1)
    proficiency: int = Field(default=0, ge=0, le=100)
    visible: bool = True


class SkillUpdate(BaseModel):
    nullable: ClassVar[FrozenSet[str]] = frozenset({"icon", "image_url"})

    name: Optional[str] = Field(default=None, min_length=1)
    icon: Optional[str] = None
    image_url: Optional[str] = None
    category: Optional[str] = Field(default=None, min_length=1)
    proficiency: Optional[int] = Field(default=None, ge=0, le=100)
    visible: Optional[bool] = None
    order: Optional[int] = None


class ExperienceCreate(BaseModel):
    company: str = Field(min_length=1)
    position: str = Field(min_length=1)
    location: str = Field(min_length=1)
    start_date: LooseDate
    end_date: OptionalDate = None
    current: bool = False
    description: str = Field(min_length=1)
    technologies: List[str] = Field(default_factory=list)
    visible: bool = True


class ExperienceUpdate(BaseModel):
    nullable: ClassVar[FrozenSet[str]] = frozenset({"end_date"})

    company: Optional[str] = Field(default=None, min_length=1)
    position: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    start_date: OptionalDate = None
    end_date: OptionalDate = None
    current: Optional[bool] = None
    description: Optional[str] = Field(default=None, min_length=1)
    technologies: Optional[List[str]] = None
    visible: Optional[bool] = None
    order: Optional[int] = None


class EducationCreate(BaseModel):
    institution: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    field: Optional[str] = None
    location: str = Field(min_length=1)
    start_date: LooseDate
    end_date: OptionalDate = None
    description: Optional[str] = None
    visible: bool = True


class EducationUpdate(BaseModel):
    nullable: ClassVar[FrozenSet[str]] = frozenset({"field", "end_date", "description"})

    institution: Optional[str] = Field(default=None, min_length=1)
    degree: Optional[str] = Field(default=None, min_length=1)
    field: Optional[str] = None
    location: Optional[str] = Field(default=None, min_length=1)
    start_date: OptionalDate = None
    end_date: OptionalDate = None
    description: Optional[str] = None
    visible: Optional[bool] = None
    order: Optional[int] = None


class SocialLinks(BaseModel):
    github: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None


class ProfileUpdate(BaseModel):
    name: str = Field(min_length=1)
    title: str = Field(min_length=1)
    email: EmailStr
    phone: Optional[str] = None
    location: str = Field(min_length=1)
    avatar: Optional[str] = None
    resume_url: Optional[str] = None
    bio: str = Field(min_length=1)
    social: SocialLinks = Field(default_factory=SocialLinks)


class AboutSkill(BaseModel):
    name: str
    icon: Optional[str] = None


class AboutHighlight(BaseModel):
    icon: Optional[str] = None
    title: str
    description: str


class AboutUpdate(BaseModel):
    section_label: str = Field(default="About Me", min_length=1)
    title: str = Field(default="Passionate Developer,", min_length=1)
    title_highlight: str = Field(default="Problem Solver", min_length=1)
    description: List[str] = Field(default_factory=list)
    skills: List[AboutSkill] = Field(default_factory=list)
    years_experience: int = Field(default=3, ge=0)
    projects_count: int = Field(default=20, ge=0)
    highlights: List[AboutHighlight] = Field(default_factory=list)
    profile_emoji: str = "\U0001F468\u200d\U0001F4BB"
    show_image: bool = True
    image_position: Literal["left", "right"] = "right"


class ContactCreate(BaseModel):
    name: str = Field(min_length=1)
    email: EmailStr
    subject: Optional[str] = None
    message: str = Field(min_length=1)


class MessageUpdate(BaseModel):
    read: Optional[bool] = None
    archived: Optional[bool] = None


class SiteConfigUpdate(BaseModel):
    key: str = Field(min_length=1, max_length=100)
    value: Any


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


def changed_fields(update: BaseModel) -> Dict[str, Any]:
    """
    Fields the client actually sent. An explicit null only clears columns
    listed in the schema's `nullable`; elsewhere it is ignored.
    """
    nullable = getattr(update, "nullable", frozenset())
    return {
        name: value
        for name, value in update.model_dump(exclude_unset=True).items()
        if value is not None or name in nullable
    }
