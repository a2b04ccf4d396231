from portfolio.extensions import db
from .base import BaseModel, OrderedMixin

class Project(BaseModel, OrderedMixin):
    __tablename__ = "projects"

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, unique=True, index=True)
    description = db.Column(db.Text, nullable=False)
    long_description = db.Column(db.Text, nullable=True)
    image = db.Column(db.String(512), nullable=True)
    tags = db.Column(db.JSON, nullable=False, default=list)
    links = db.Column(db.JSON, nullable=False, default=dict)  # demo, github
    featured = db.Column(db.Boolean, nullable=False, default=False, index=True)
    category = db.Column(db.String(100), nullable=False, default="web")
