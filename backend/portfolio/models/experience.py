from portfolio.extensions import db
from .base import BaseModel, OrderedMixin

class Experience(BaseModel, OrderedMixin):
    __tablename__ = "experiences"

    company = db.Column(db.String(200), nullable=False)
    position = db.Column(db.String(200), nullable=False)
    location = db.Column(db.String(200), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=True)
    current = db.Column(db.Boolean, nullable=False, default=False)
    description = db.Column(db.Text, nullable=False)
    technologies = db.Column(db.JSON, nullable=False, default=list)
