from flask import jsonify
from portfolio.models.contact_message import ContactMessage
from portfolio.models.education import Education
from portfolio.models.experience import Experience
from portfolio.models.project import Project
from portfolio.models.skill import Skill
from portfolio.utils.decorators import roles_required
from . import v1_bp

@v1_bp.route("/admin/dashboard", methods=["GET"])
@roles_required("VIEWER")
def admin_dashboard():
    return jsonify({
        "counts": {
            "projects": Project.query.count(),
            "skills": Skill.query.count(),
            "experience": Experience.query.count(),
            "education": Education.query.count(),
            "messages": ContactMessage.query.filter_by(archived=False).count(),
            "unread_messages": ContactMessage.query.filter_by(read=False, archived=False).count(),
        }
    })
