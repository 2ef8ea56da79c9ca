from flask import Blueprint, jsonify
from app.models import ProjectStatus, RiskLevel, MilestoneStatus, Priority, ShareRole, UTILIZATION_WEEKS

utils_bp = Blueprint('utils', __name__)

@utils_bp.route('/api/enums', methods=['GET'])
def get_enums():
    """Get all available enum values for frontend"""
    return jsonify({
        'project_statuses': [e.value for e in ProjectStatus],
        'risk_levels': [e.value for e in RiskLevel],
        'milestone_statuses': [e.value for e in MilestoneStatus],
        'priorities': [e.value for e in Priority],
        'share_roles': [e.value for e in ShareRole],
        'weeks': list(UTILIZATION_WEEKS)
    })
