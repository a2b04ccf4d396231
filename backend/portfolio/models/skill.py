from portfolio.extensions import db
from .base import BaseModel, OrderedMixin

class Skill(BaseModel, OrderedMixin):
    __tablename__ = "skills"

    name = db.Column(db.String(100), nullable=False)
    icon = db.Column(db.String(100), nullable=True)
    image_url = db.Column(db.String(512), nullable=True)
    category = db.Column(db.String(100), nullable=False, index=True)
    proficiency = db.Column(db.Integer, nullable=False, default=0)
