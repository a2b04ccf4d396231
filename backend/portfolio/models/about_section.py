from portfolio.extensions import db
from .base import BaseModel

class AboutSection(BaseModel):
    __tablename__ = "about_sections"

    section_label = db.Column(db.String(100), nullable=False, default="About Me")
    title = db.Column(db.String(200), nullable=False, default="Passionate Developer,")
    title_highlight = db.Column(db.String(200), nullable=False, default="Problem Solver")
    description = db.Column(db.JSON, nullable=False, default=list)  # paragraphs
    skills = db.Column(db.JSON, nullable=False, default=list)  # [{name, icon}]
    years_experience = db.Column(db.Integer, nullable=False, default=3)
    projects_count = db.Column(db.Integer, nullable=False, default=20)
    highlights = db.Column(db.JSON, nullable=False, default=list)  # [{icon, title, description}]
    profile_emoji = db.Column(db.String(16), nullable=False, default="\U0001F468\u200d\U0001F4BB")
    show_image = db.Column(db.Boolean, nullable=False, default=True)
    image_position = db.Column(db.String(10), nullable=False, default="right")
