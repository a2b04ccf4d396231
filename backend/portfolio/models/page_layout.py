from portfolio.extensions import db
from .base import BaseModel

class PageLayout(BaseModel):
    __tablename__ = "page_layouts"

    page_name = db.Column(db.String(100), nullable=False, unique=True, index=True)
    # Raw section array, either {enabled, config} or {visible, props} shaped
    sections = db.Column(db.JSON, nullable=False, default=list)
