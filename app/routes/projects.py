from flask import Blueprint, request, jsonify
from app.services import aggregation, projects

projects_bp = Blueprint('projects', __name__)

@projects_bp.route('/api/projects', methods=['GET'])
def get_projects():
    """Get all projects ordered by id"""
    return jsonify(projects.list_projects())

@projects_bp.route('/api/projects', methods=['POST'])
def create_project():
    """Create a new project"""
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        return jsonify({'error': 'No data provided'}), 400

    result = projects.create_project(data)
    return jsonify({'success': True, 'id': result['id']}), 201

@projects_bp.route('/api/projects/stats', methods=['GET'])
def get_project_stats():
    """Get project counts by status"""
    return jsonify(aggregation.get_stats())

@projects_bp.route('/api/projects/<project_id>', methods=['GET'])
def get_project(project_id):
    """Get a single project"""
    project = projects.get_project(project_id)
    if project is None:
        return jsonify({'error': 'Project not found'}), 404
    return jsonify(project)

@projects_bp.route('/api/projects/<project_id>', methods=['PUT'])
def update_project(project_id):
    """Merge the request body into the stored project and save the result"""
    existing = projects.get_project(project_id)
    if existing is None:
        return jsonify({'error': 'Project not found'}), 404

    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'No data provided'}), 400

    # The id in the URL wins; ids never change
    merged = {**existing, **data, 'id': existing['id']}
    projects.update_project(merged)
    return jsonify(projects.get_project(project_id))

@projects_bp.route('/api/projects/<project_id>', methods=['DELETE'])
def delete_project(project_id):
    """Delete a project and its milestones"""
    if projects.get_project(project_id) is None:
        return jsonify({'error': 'Project not found'}), 404

    projects.delete_project(project_id)
    return jsonify({'message': 'Project deleted successfully'})

@projects_bp.route('/api/projects/<project_id>/budget', methods=['GET'])
def get_project_budget(project_id):
    """Get planned/actual budget with variance and percent spent"""
    project = projects.get_project(project_id)
    if project is None:
        return jsonify({'error': 'Project not found'}), 404
    return jsonify(aggregation.budget_summary(project))
