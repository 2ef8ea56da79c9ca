import logging
from collections import defaultdict

from app.errors import ConstraintViolation, ValidationError
from app.extensions import db
from app.models import TeamMember, TeamMemberProject, ResourceUtilization
from app.services.common import clean_id, commit_or_raise, parse_fields, require_fields
from app.utils.validators import validate_integer, validate_week

logger = logging.getLogger(__name__)


def _project_ids_by_member(member_ids):
    projects = defaultdict(list)
    if member_ids:
        rows = db.session.query(TeamMemberProject.team_member_id, TeamMemberProject.project_id).filter(
            TeamMemberProject.team_member_id.in_(member_ids)
        ).order_by(TeamMemberProject.id).all()
        for member_id, project_id in rows:
            projects[member_id].append(project_id)
    return projects


def list_team_members():
    """Team members ordered by name, each with the ids of its projects"""
    members = TeamMember.query.order_by(TeamMember.name, TeamMember.id).all()
    projects = _project_ids_by_member([m.id for m in members])
    return [m.to_dict(projects=projects[m.id]) for m in members]


def get_team_member(member_id):
    member = db.session.get(TeamMember, clean_id(member_id))
    if member is None:
        return None
    projects = _project_ids_by_member([member.id])
    return member.to_dict(projects=projects[member.id])


def create_team_member(data):
    require_fields(data, ['id', 'name'])
    member_id = clean_id(data['id'])

    if db.session.get(TeamMember, member_id) is not None:
        raise ConstraintViolation(f'Team member {member_id} already exists')

    db.session.add(TeamMember(id=member_id, **parse_fields(data, TeamMember.FIELDS)))
    commit_or_raise(f'creating team member {member_id}')
    logger.info('Created team member %s', member_id)
    return {'id': member_id}


def delete_team_member(member_id):
    """Delete a member with its allocations, utilization history and milestone assignments"""
    member_id = clean_id(member_id)
    member = db.session.get(TeamMember, member_id)
    if member is None:
        return False

    db.session.delete(member)
    commit_or_raise(f'deleting team member {member_id}')
    logger.info('Deleted team member %s', member_id)
    return True


def assign_to_project(member_id, project_id, allocation=50):
    is_valid, result = validate_integer(allocation)
    if not is_valid:
        raise ValidationError(f'allocation: {result}')

    db.session.add(TeamMemberProject(team_member_id=clean_id(member_id),
                                     project_id=clean_id(project_id), allocation=result))
    commit_or_raise(f'allocating {member_id} to project {project_id}')


def record_utilization(member_id, week, utilization):
    """Set a member's utilization for a week, replacing any earlier value"""
    is_valid, error = validate_week(week)
    if not is_valid:
        raise ValidationError(error)
    is_valid, result = validate_integer(utilization)
    if not is_valid:
        raise ValidationError(f'utilization: {result}')

    member_id = clean_id(member_id)
    entry = ResourceUtilization.query.filter_by(team_member_id=member_id, week=week).first()
    if entry is None:
        db.session.add(ResourceUtilization(team_member_id=member_id, week=week, utilization=result))
    else:
        entry.utilization = result
    commit_or_raise(f'recording utilization for {member_id}')
