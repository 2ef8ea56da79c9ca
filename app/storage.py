"""Schema lifecycle for the portfolio store.

Every function here runs inside the application context of the app created by
``create_app``; that app owns the engine, so each app (and each test) gets its
own isolated store.
"""
import logging
import sqlite3

from flask import current_app
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from app.errors import ConstraintViolation
from app.extensions import db
from app.models import (Project, TeamMember, TeamMemberProject, ResourceUtilization,
                        Milestone, MilestoneAssignee, MilestoneDependency)

logger = logging.getLogger(__name__)

# Children before parents
_CLEAR_ORDER = (
    MilestoneDependency,
    MilestoneAssignee,
    Milestone,
    ResourceUtilization,
    TeamMemberProject,
    TeamMember,
    Project,
)


@event.listens_for(Engine, 'connect')
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE and FK checks unless asked per connection
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute('PRAGMA foreign_keys=ON')
        cursor.close()


def initialize(seed=None):
    """Create missing tables and seed sample data into an empty store.

    Safe to call on every start. ``seed`` overrides the ``SEED_ON_INIT``
    setting. Returns True when the sample data was inserted.
    """
    db.create_all()

    if seed is None:
        seed = current_app.config.get('SEED_ON_INIT', True)
    if not seed:
        return False

    if db.session.query(Project.id).first() is not None:
        return False

    from app.seed import seed_database

    logger.info('No projects found, seeding sample portfolio data')
    seed_database()
    return True


def run_atomic(steps):
    """Run callables in a single transaction: all of them apply or none do."""
    try:
        for step in steps:
            step()
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        logger.warning('Atomic block rolled back: %s', e.orig)
        raise ConstraintViolation(str(e.orig)) from e
    except Exception:
        db.session.rollback()
        logger.exception('Atomic block rolled back')
        raise


def clear_all_data():
    """Remove every row from every table, keeping the schema."""
    run_atomic([_delete_all(model) for model in _CLEAR_ORDER])
    logger.info('All portfolio data cleared')


def clear_milestone_data():
    """Remove milestones with their assignee and dependency rows; projects and team data stay."""
    run_atomic([_delete_all(model) for model in (MilestoneDependency, MilestoneAssignee, Milestone)])
    logger.info('All milestones cleared')


def _delete_all(model):
    def step():
        model.query.delete()
    return step


def table_counts():
    return {
        'projects': db.session.query(Project).count(),
        'teamMembers': db.session.query(TeamMember).count(),
        'milestones': db.session.query(Milestone).count(),
    }


def shutdown():
    """Release the session and the engine's pooled connections."""
    db.session.remove()
    db.engine.dispose()
