from portfolio.extensions import db
from .base import BaseModel

class SiteConfig(BaseModel):
    __tablename__ = "site_config"

    key = db.Column(db.String(100), nullable=False, unique=True, index=True)
    value = db.Column(db.JSON, nullable=False, default=dict)
