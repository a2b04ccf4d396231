from .user import User
from .audit_log import AuditLog
from .profile import Profile
from .about_section import AboutSection
from .skill import Skill
from .project import Project
from .experience import Experience
from .education import Education
from .site_config import SiteConfig
from .page_layout import PageLayout
from .contact_message import ContactMessage
