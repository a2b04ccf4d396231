from flask import Blueprint

# Create the versioned blueprint
v1_bp = Blueprint("v1", __name__)

# Import route modules so they register with v1_bp
from . import health
from . import auth
from . import site
from . import layouts
from . import projects
from . import skills
from . import experience
from . import education
from . import profile
from . import messages
from . import admin
from . import audit
