from flask import Blueprint, jsonify
from app.services import aggregation, team_members

team_members_bp = Blueprint('team_members', __name__)

@team_members_bp.route('/api/team-members', methods=['GET'])
def get_team_members():
    """Get team members with their weekly utilization matrix"""
    return jsonify(aggregation.get_utilization_data())

@team_members_bp.route('/api/team-members/<member_id>', methods=['GET'])
def get_team_member(member_id):
    member = team_members.get_team_member(member_id)
    if member is None:
        return jsonify({'error': 'Team member not found'}), 404
    return jsonify(member)
