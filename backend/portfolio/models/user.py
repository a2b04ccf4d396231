from werkzeug.security import generate_password_hash, check_password_hash
from portfolio.extensions import db
from .base import BaseModel

ROLES = ("VIEWER", "EDITOR", "ADMIN")

class User(BaseModel):
    __tablename__ = 'users'

    email = db.Column(db.String(120), unique=True, nullable=False)
    name = db.Column(db.String(120), nullable=True)
    password_hash = db.Column(db.String(256), nullable=True)

    role = db.Column(db.String(20), nullable=False, default='VIEWER')
    is_active = db.Column(db.Boolean, default=True)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        if not self.password_hash:
            return False
        return check_password_hash(self.password_hash, password)
