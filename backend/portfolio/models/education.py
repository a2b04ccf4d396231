from portfolio.extensions import db
from .base import BaseModel, OrderedMixin

class Education(BaseModel, OrderedMixin):
    __tablename__ = "education"

    institution = db.Column(db.String(200), nullable=False)
    degree = db.Column(db.String(200), nullable=False)
    field = db.Column(db.String(200), nullable=True)
    location = db.Column(db.String(200), nullable=False)
    start_date = db.Column(db.Date, nullable=False)
    end_date = db.Column(db.Date, nullable=True)
    description = db.Column(db.Text, nullable=True)
