"""Project operations.

Writes are full replacements: callers merge partial changes into a complete
project before calling ``update_project``. Concurrent updates are
last-write-wins.
"""
import logging

from app.clock import next_timestamp
from app.errors import ConstraintViolation
from app.extensions import db
from app.models import Project
from app.services.common import clean_id, commit_or_raise, parse_fields, require_fields

logger = logging.getLogger(__name__)


def list_projects():
    """All projects ordered by id"""
    projects = Project.query.order_by(Project.id).all()
    return [p.to_dict() for p in projects]


def get_project(project_id):
    """The project as a dict, or None when it does not exist"""
    project = db.session.get(Project, clean_id(project_id))
    return project.to_dict() if project else None


def create_project(data):
    """Insert a project with its client-supplied id.

    Raises:
        ValidationError: missing id/name or a malformed field.
        ConstraintViolation: a project with this id already exists.
    """
    require_fields(data, ['id', 'name'])
    project_id = clean_id(data['id'])

    if db.session.get(Project, project_id) is not None:
        raise ConstraintViolation(f'Project {project_id} already exists')

    project = Project(id=project_id, **parse_fields(data, Project.FIELDS))
    db.session.add(project)
    commit_or_raise(f'creating project {project_id}')

    logger.info('Created project %s', project_id)
    return {'id': project_id}


def update_project(data):
    """Overwrite every column of an existing project and bump updatedAt.

    Returns False when no project has the given id.
    """
    require_fields(data, ['id', 'name'])
    project = db.session.get(Project, clean_id(data['id']))
    if project is None:
        return False

    for attr, value in parse_fields(data, Project.FIELDS).items():
        setattr(project, attr, value)
    project.updated_at = next_timestamp(project.updated_at)
    commit_or_raise(f'updating project {project.id}')
    return True


def delete_project(project_id):
    """Delete a project and, by cascade, its milestones and allocations.

    Returns False when there was nothing to delete.
    """
    project_id = clean_id(project_id)
    project = db.session.get(Project, project_id)
    if project is None:
        return False

    db.session.delete(project)
    commit_or_raise(f'deleting project {project_id}')
    logger.info('Deleted project %s', project_id)
    return True
