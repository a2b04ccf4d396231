from portfolio.extensions import db
from .base import BaseModel

class Profile(BaseModel):
    __tablename__ = "profiles"

    name = db.Column(db.String(200), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    email = db.Column(db.String(200), nullable=False)
    phone = db.Column(db.String(50), nullable=True)
    location = db.Column(db.String(200), nullable=False)
    avatar = db.Column(db.String(512), nullable=True)
    resume_url = db.Column(db.String(512), nullable=True)
    bio = db.Column(db.Text, nullable=False)
    social = db.Column(db.JSON, nullable=False, default=dict)
