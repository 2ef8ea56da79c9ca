from flask import Blueprint, request, jsonify
from app.services import milestones

milestones_bp = Blueprint('milestones', __name__)

@milestones_bp.route('/api/milestones', methods=['GET'])
def get_milestones():
    """Get all milestones, or those of one project with ?projectId="""
    project_id = request.args.get('projectId')
    if project_id:
        return jsonify(milestones.list_milestones_by_project(project_id))
    return jsonify(milestones.list_milestones())

@milestones_bp.route('/api/milestones', methods=['POST'])
def create_milestone():
    """Create a milestone; an id is generated when none is given"""
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify({'error': 'No data provided'}), 400

    result = milestones.create_milestone(data)
    return jsonify({'id': result['id']}), 201

@milestones_bp.route('/api/milestones/<milestone_id>', methods=['GET'])
def get_milestone(milestone_id):
    milestone = milestones.get_milestone(milestone_id)
    if milestone is None:
        return jsonify({'error': 'Milestone not found'}), 404
    return jsonify(milestone)

@milestones_bp.route('/api/milestones/<milestone_id>', methods=['PUT'])
def update_milestone(milestone_id):
    """Merge the request body into the stored milestone and save the result"""
    existing = milestones.get_milestone(milestone_id)
    if existing is None:
        return jsonify({'error': 'Milestone not found'}), 404

    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'No data provided'}), 400
    merged = {**existing, **data, 'id': existing['id']}
    milestones.update_milestone(merged)
    return jsonify(milestones.get_milestone(milestone_id))

@milestones_bp.route('/api/milestones/<milestone_id>', methods=['DELETE'])
def delete_milestone(milestone_id):
    if milestones.get_milestone(milestone_id) is None:
        return jsonify({'error': 'Milestone not found'}), 404

    milestones.delete_milestone(milestone_id)
    return jsonify({'message': 'Milestone deleted successfully'})
