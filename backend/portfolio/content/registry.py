"""
Section registry: the fixed table from section type to renderer.

Each definition carries:
- the Jinja template that renders it
- which shared page data it consumes (and under which prop name)
- default props for newly added sections
- editable prop definitions for the page builder UI

The table is built at import time and never reads the content store.
Adding a new section type means adding a definition here.
"""

from __future__ import annotations

import copy
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional

from flask import render_template
from markupsafe import Markup
from pydantic import BaseModel, Field

from portfolio.content.section import Section

RenderFn = Callable[[Section, Mapping[str, Any]], Markup]


class PropOption(BaseModel):
    label: str
    value: str


class PropDefinition(BaseModel):
    """One field the page builder exposes for a section type."""

    name: str  # dotted names address nested keys, e.g. ctaPrimary.href
    label: str
    kind: Literal["text", "textarea", "number", "boolean", "select", "color", "image"]
    options: Optional[List[PropOption]] = None
    default: Any = None


class SectionDefinition(BaseModel):
    """Definition of a renderable section type. Calling it renders HTML."""

    type: str
    label: str
    icon: str
    template: str
    # shared-data key -> prop name; a None prop name spreads the value's keys
    data_keys: Dict[str, Optional[str]] = Field(default_factory=dict)
    default_props: Dict[str, Any] = Field(default_factory=dict)
    editable_props: List[PropDefinition] = Field(default_factory=list)

    def inject(self, shared_data: Mapping[str, Any] | None) -> Dict[str, Any]:
        """
        Select the shared data this section consumes.

        Definitions that declare no keys receive the whole shared map.
        Missing or None shared entries are skipped.
        """
        if not shared_data:
            return {}

        if not self.data_keys:
            return dict(shared_data)

        injected: Dict[str, Any] = {}
        for source, prop_name in self.data_keys.items():
            value = shared_data.get(source)
            if value is None:
                continue
            if prop_name is None:
                injected.update(value)
            else:
                injected[prop_name] = value
        return injected

    def __call__(self, section: Section, props: Mapping[str, Any]) -> Markup:
        return Markup(render_template(self.template, section=section, props=props))


def _select(name, label, *values):
    return PropDefinition(
        name=name,
        label=label,
        kind="select",
        options=[PropOption(label=v.title(), value=v) for v in values],
        default=values[0],
    )


HERO = SectionDefinition(
    type="hero",
    label="Hero",
    icon="sparkles",
    template="sections/hero.html",
    default_props={
        "headline": "New Section",
        "subheadline": "Edit this section",
    },
    editable_props=[
        PropDefinition(name="headline", label="Headline", kind="text"),
        PropDefinition(name="subheadline", label="Badge Text", kind="text"),
        PropDefinition(name="description", label="Description", kind="textarea"),
        PropDefinition(name="ctaPrimary.label", label="Primary CTA Text", kind="text"),
        PropDefinition(name="ctaPrimary.href", label="Primary CTA Link", kind="text"),
        PropDefinition(name="ctaSecondary.label", label="Secondary CTA Text", kind="text"),
        PropDefinition(name="ctaSecondary.href", label="Secondary CTA Link", kind="text"),
        _select("backgroundStyle", "Background", "gradient", "particles", "none"),
    ],
)

ABOUT = SectionDefinition(
    type="about",
    label="About",
    icon="user",
    template="sections/about.html",
    data_keys={"about": None},
    editable_props=[
        PropDefinition(name="sectionLabel", label="Section Label", kind="text", default="About Me"),
        PropDefinition(name="title", label="Title", kind="text"),
        _select("imagePosition", "Image Position", "right", "left"),
        PropDefinition(name="showImage", label="Show Image", kind="boolean", default=True),
    ],
)

SKILLS = SectionDefinition(
    type="skills",
    label="Skills",
    icon="code",
    template="sections/skills.html",
    data_keys={"categories": "categories"},
    default_props={"title": "Skills & Technologies"},
    editable_props=[
        PropDefinition(name="title", label="Title", kind="text"),
        _select("layout", "Layout", "grid", "carousel", "list"),
        PropDefinition(name="showProficiency", label="Show Proficiency", kind="boolean", default=True),
    ],
)

_PROJECT_PROPS = [
    PropDefinition(name="title", label="Title", kind="text"),
    PropDefinition(name="maxItems", label="Max Items", kind="number"),
    PropDefinition(name="showViewAll", label="Show 'View All'", kind="boolean", default=True),
    _select("layout", "Layout", "cards", "list", "masonry"),
]

PROJECTS = SectionDefinition(
    type="projects",
    label="Projects",
    icon="folder",
    template="sections/projects.html",
    data_keys={"projects": "projects"},
    default_props={"title": "Featured Projects"},
    editable_props=_PROJECT_PROPS,
)

PROJECTS_GRID = SectionDefinition(
    type="projects-grid",
    label="Projects Grid",
    icon="grid",
    template="sections/projects.html",
    data_keys={"projects": "projects"},
    default_props={"title": "Projects", "layout": "cards"},
    editable_props=_PROJECT_PROPS,
)

EXPERIENCE = SectionDefinition(
    type="experience",
    label="Experience",
    icon="briefcase",
    template="sections/experience.html",
    data_keys={"experiences": "experiences"},
    default_props={"title": "Experience"},
    editable_props=[
        PropDefinition(name="title", label="Title", kind="text"),
        _select("layout", "Layout", "timeline", "detailed", "list"),
    ],
)

EDUCATION = SectionDefinition(
    type="education",
    label="Education",
    icon="graduation-cap",
    template="sections/education.html",
    data_keys={"education": "education"},
    default_props={"title": "Education"},
    editable_props=[
        PropDefinition(name="title", label="Title", kind="text"),
    ],
)

CONTACT = SectionDefinition(
    type="contact",
    label="Contact",
    icon="mail",
    template="sections/contact.html",
    data_keys={"contact": None},
    default_props={
        "title": "Get In Touch",
        "description": "Feel free to reach out for collaborations or just a friendly hello",
    },
    editable_props=[
        PropDefinition(name="title", label="Title", kind="text"),
        PropDefinition(name="description", label="Description", kind="textarea"),
        PropDefinition(name="showSocial", label="Show Social Links", kind="boolean", default=True),
    ],
)

CONTACT_CTA = SectionDefinition(
    type="contact-cta",
    label="Contact CTA",
    icon="send",
    template="sections/contact_cta.html",
    default_props={
        "title": "Let's Work Together",
        "description": "Have a project in mind? Let's talk about it.",
        "primaryCTA": {"label": "Get In Touch", "href": "/contact"},
    },
    editable_props=[
        PropDefinition(name="title", label="Title", kind="text"),
        PropDefinition(name="description", label="Description", kind="textarea"),
    ],
)

CUSTOM = SectionDefinition(
    type="custom",
    label="Custom",
    icon="square",
    template="sections/custom.html",
    default_props={"title": "Custom Section", "body": ""},
    editable_props=[
        PropDefinition(name="title", label="Title", kind="text"),
        PropDefinition(name="body", label="Body", kind="textarea"),
        PropDefinition(name="background", label="Background", kind="color"),
    ],
)

SECTION_REGISTRY: Dict[str, SectionDefinition] = {
    definition.type: definition
    for definition in (
        HERO,
        ABOUT,
        SKILLS,
        PROJECTS,
        PROJECTS_GRID,
        EXPERIENCE,
        EDUCATION,
        CONTACT,
        CONTACT_CTA,
        CUSTOM,
    )
}


def get_definition(section_type: str) -> Optional[SectionDefinition]:
    return SECTION_REGISTRY.get(section_type)


def resolve(section_type: str) -> Optional[RenderFn]:
    """Renderer for a section type, or None when the type is unknown."""
    return get_definition(section_type)


def default_props(section_type: str) -> Dict[str, Any]:
    definition = get_definition(section_type)
    if definition is None:
        return {}
    return copy.deepcopy(definition.default_props)


def catalog() -> List[Dict[str, Any]]:
    """JSON-ready list of section types for the page builder palette."""
    return [
        definition.model_dump(exclude={"template", "data_keys"})
        for definition in SECTION_REGISTRY.values()
    ]
