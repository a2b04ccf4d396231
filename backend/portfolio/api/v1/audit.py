from flask import request, jsonify
from portfolio.models.audit_log import AuditLog
from portfolio.normalizers.audit import normalize_audit_log
from portfolio.normalizers.pagination import normalize_pagination
from portfolio.utils.decorators import roles_required
from portfolio.utils.pagination import paginate_cursor, parse_limit
from . import v1_bp


@v1_bp.route("/admin/audit", methods=["GET"])
@roles_required("ADMIN")
def list_audit_logs():
    limit = parse_limit(request.args.get("limit"))
    cursor = request.args.get("cursor")

    query = AuditLog.query

    # Optional filters
    if action := request.args.get("action"):
        query = query.filter(AuditLog.action == action)

    if entity_type := request.args.get("entity_type"):
        query = query.filter(AuditLog.entity_type == entity_type)

    if entity_id := request.args.get("entity_id"):
        query = query.filter(AuditLog.entity_id == entity_id)

    if actor_id := request.args.get("actor_id"):
        query = query.filter(AuditLog.actor_id == actor_id)

    logs, meta = paginate_cursor(query, model=AuditLog, limit=limit, cursor=cursor)

    return jsonify(normalize_pagination(logs, normalize_audit_log, cursor=meta)), 200
