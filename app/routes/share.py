from flask import Blueprint, request, jsonify
from app.models import ShareRole
from app.services import notifications
from app.utils import validate_required_fields, validate_email_format, validate_enum

share_bp = Blueprint('share', __name__)

@share_bp.route('/api/projects/share', methods=['POST'])
def share_project():
    """Invite someone to a project by email"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'No data provided'}), 400

    is_valid, error = validate_required_fields(data, ['to', 'projectName', 'projectId', 'role'])
    if not is_valid:
        return jsonify({'error': error}), 400

    is_valid, error = validate_email_format(data['to'])
    if not is_valid:
        return jsonify({'error': error}), 400

    is_valid, result = validate_enum(ShareRole, data['role'])
    if not is_valid:
        return jsonify({'error': result}), 400

    if not notifications.send_share_invitation(data):
        return jsonify({'error': 'Failed to send invitation'}), 500

    return jsonify({
        'message': 'Invitation sent successfully',
        'sentTo': data['to']
    })
