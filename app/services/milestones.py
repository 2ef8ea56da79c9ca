"""Milestone operations.

Reads fold the join tables into flat lists: ``assignees`` holds team member
display names, ``dependencies`` holds milestone ids. Each read issues one
query per join table for the whole batch of milestones.
"""
import logging
import random
import string
import time
from collections import defaultdict

from app.clock import next_timestamp
from app.errors import ConstraintViolation, ValidationError
from app.extensions import db
from app.models import Milestone, MilestoneAssignee, MilestoneDependency, Project, TeamMember
from app.services.common import clean_id, commit_or_raise, parse_fields, require_fields

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase


def generate_milestone_id():
    """``ms<epoch millis>-<base36 suffix>``; collisions are not checked"""
    suffix = ''.join(random.choices(_ID_ALPHABET, k=9))
    return f'ms{int(time.time() * 1000)}-{suffix}'


def _reshape(rows):
    """Turn (Milestone, project name) rows into milestone dicts"""
    milestone_ids = [milestone.id for milestone, _ in rows]
    assignees = defaultdict(list)
    dependencies = defaultdict(list)

    if milestone_ids:
        assignee_rows = db.session.query(MilestoneAssignee.milestone_id, TeamMember.name).join(
            TeamMember, MilestoneAssignee.team_member_id == TeamMember.id
        ).filter(
            MilestoneAssignee.milestone_id.in_(milestone_ids)
        ).order_by(MilestoneAssignee.id).all()
        for milestone_id, name in assignee_rows:
            assignees[milestone_id].append(name)

        dependency_rows = db.session.query(
            MilestoneDependency.milestone_id, MilestoneDependency.dependency_id
        ).filter(
            MilestoneDependency.milestone_id.in_(milestone_ids)
        ).order_by(MilestoneDependency.id).all()
        for milestone_id, dependency_id in dependency_rows:
            dependencies[milestone_id].append(dependency_id)

    return [
        milestone.to_dict(
            project_name=project_name,
            assignees=assignees[milestone.id],
            dependencies=dependencies[milestone.id],
        )
        for milestone, project_name in rows
    ]


def _base_query():
    return db.session.query(Milestone, Project.name).join(Project, Milestone.project_id == Project.id)


def list_milestones(project_id=None):
    """Milestones ordered by start date, optionally limited to one project"""
    query = _base_query()
    if project_id is not None:
        query = query.filter(Milestone.project_id == clean_id(project_id))
    rows = query.order_by(Milestone.start_date, Milestone.id).all()
    return _reshape(rows)


def list_milestones_by_project(project_id):
    return list_milestones(project_id=project_id)


def get_milestone(milestone_id):
    row = _base_query().filter(Milestone.id == clean_id(milestone_id)).first()
    if row is None:
        return None
    return _reshape([row])[0]


def create_milestone(data):
    """Insert a milestone, generating its id when none (or a blank one) is given.

    Assignees and dependencies in ``data`` are ignored; link them with
    ``add_assignee`` and ``add_dependency``.

    Raises:
        ValidationError: missing projectId/name or a malformed field.
        ConstraintViolation: duplicate id or unknown project.
    """
    require_fields(data, ['projectId', 'name'])
    milestone_id = clean_id(data.get('id')) or generate_milestone_id()

    if db.session.get(Milestone, milestone_id) is not None:
        raise ConstraintViolation(f'Milestone {milestone_id} already exists')

    milestone = Milestone(id=milestone_id, **parse_fields(data, Milestone.FIELDS))
    db.session.add(milestone)
    commit_or_raise(f'creating milestone {milestone_id}')

    logger.info('Created milestone %s for project %s', milestone_id, milestone.project_id)
    return {'id': milestone_id}


def update_milestone(data):
    """Overwrite the scalar columns of a milestone and bump updatedAt.

    Join rows (assignees, dependencies) are left untouched. Returns False
    when no milestone has the given id.
    """
    require_fields(data, ['id', 'projectId', 'name'])
    milestone = db.session.get(Milestone, clean_id(data['id']))
    if milestone is None:
        return False

    for attr, value in parse_fields(data, Milestone.FIELDS).items():
        setattr(milestone, attr, value)
    milestone.updated_at = next_timestamp(milestone.updated_at)
    commit_or_raise(f'updating milestone {milestone.id}')
    return True


def delete_milestone(milestone_id):
    """Delete a milestone with its assignee rows and every dependency row
    that names it on either side. Returns False when there was nothing to delete.
    """
    milestone_id = clean_id(milestone_id)
    milestone = db.session.get(Milestone, milestone_id)
    if milestone is None:
        return False

    db.session.delete(milestone)
    commit_or_raise(f'deleting milestone {milestone_id}')
    logger.info('Deleted milestone %s', milestone_id)
    return True


def add_assignee(milestone_id, team_member_id, role='Team Member'):
    link = MilestoneAssignee(milestone_id=clean_id(milestone_id),
                             team_member_id=clean_id(team_member_id), role=role)
    db.session.add(link)
    commit_or_raise(f'assigning {team_member_id} to milestone {milestone_id}')


def add_dependency(milestone_id, dependency_id):
    """Record that ``milestone_id`` waits on ``dependency_id``. Cycles are not checked."""
    milestone_id = clean_id(milestone_id)
    dependency_id = clean_id(dependency_id)
    if milestone_id == dependency_id:
        raise ValidationError('A milestone cannot depend on itself')

    db.session.add(MilestoneDependency(milestone_id=milestone_id, dependency_id=dependency_id))
    commit_or_raise(f'linking milestone {milestone_id} to {dependency_id}')
