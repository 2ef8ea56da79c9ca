from datetime import datetime

import pytest

from app.errors import ConstraintViolation, ValidationError
from app.extensions import db
from app.models import Project
from app.services import aggregation, milestones, projects, team_members
from app.services.common import commit_or_raise

from conftest import make_milestone, make_project

TIMESTAMPS = ('createdAt', 'updatedAt')


def _without_timestamps(data):
    return {k: v for k, v in data.items() if k not in TIMESTAMPS}


def test_create_then_get_round_trips_scalar_fields(app):
    project = make_project()
    result = projects.create_project(project)

    assert result == {'id': 'PRJ-100'}
    stored = projects.get_project('PRJ-100')
    assert _without_timestamps(stored) == project
    assert stored['createdAt'] is not None
    assert stored['updatedAt'] is not None


def test_get_missing_project_returns_none(app):
    assert projects.get_project('PRJ-404') is None


def test_list_projects_is_ordered_by_id(app):
    for project_id in ('PRJ-003', 'PRJ-001', 'PRJ-002'):
        projects.create_project(make_project(id=project_id))

    assert [p['id'] for p in projects.list_projects()] == ['PRJ-001', 'PRJ-002', 'PRJ-003']


def test_duplicate_id_is_a_constraint_violation(app):
    projects.create_project(make_project())

    with pytest.raises(ConstraintViolation):
        projects.create_project(make_project(name='Again'))
    assert projects.get_project('PRJ-100')['name'] == 'Test'


@pytest.mark.parametrize('field, value', [
    ('status', 'done'),
    ('riskLevel', 'extreme'),
    ('startDate', '31/12/2024'),
    ('progress', 150),
    ('budgetPlanned', -1),
    ('daysToDue', 'soon'),
    ('daysToDue', 10 ** 20),
    ('budgetPlanned', float('nan')),
    ('budgetActual', float('inf')),
    ('budgetActual', 'Infinity'),
])
def test_malformed_fields_are_rejected(app, field, value):
    with pytest.raises(ValidationError):
        projects.create_project(make_project(**{field: value}))
    assert projects.get_project('PRJ-100') is None


def test_missing_name_is_rejected(app):
    with pytest.raises(ValidationError):
        projects.create_project(make_project(name='  '))


def test_core_team_list_is_stored_as_text(app):
    projects.create_project(make_project(coreTeam=['tm1', 'tm2']))
    assert projects.get_project('PRJ-100')['coreTeam'] == 'tm1, tm2'


def test_update_replaces_all_columns_and_advances_updated_at(app):
    projects.create_project(make_project())
    before = projects.get_project('PRJ-100')

    changed = {**before, 'status': 'blocked', 'progress': 55}
    changed.pop('sponsor')
    assert projects.update_project(changed) is True

    after = projects.get_project('PRJ-100')
    assert after['status'] == 'blocked'
    assert after['progress'] == 55
    # full replace: a key left out is cleared
    assert after['sponsor'] is None
    assert after['createdAt'] == before['createdAt']
    assert datetime.fromisoformat(after['updatedAt']) > datetime.fromisoformat(before['updatedAt'])


def test_updated_at_advances_on_back_to_back_updates(app):
    projects.create_project(make_project())
    stamps = []
    for progress in (20, 30, 40):
        projects.update_project({**projects.get_project('PRJ-100'), 'progress': progress})
        stamps.append(datetime.fromisoformat(projects.get_project('PRJ-100')['updatedAt']))

    assert stamps == sorted(stamps)
    assert len(set(stamps)) == 3


def test_update_missing_project_is_a_no_op(app):
    assert projects.update_project(make_project(id='PRJ-404')) is False
    assert projects.list_projects() == []


def test_delete_missing_project_is_a_no_op(app):
    assert projects.delete_project('PRJ-404') is False


def test_delete_cascades_to_milestones(app):
    projects.create_project(make_project())
    milestones.create_milestone(make_milestone())
    milestones.create_milestone(make_milestone(name='Second'))

    assert projects.delete_project('PRJ-100') is True

    assert projects.get_project('PRJ-100') is None
    assert milestones.list_milestones_by_project('PRJ-100') == []


def test_delete_cascades_to_allocations(seeded_app):
    assert projects.delete_project('PRJ-001') is True

    assert team_members.get_team_member('tm1')['projects'] == ['PRJ-004']
    assert team_members.get_team_member('tm2')['projects'] == []
    assert aggregation.get_stats()['total'] == 7


def test_out_of_range_integer_leaves_session_usable(app):
    with pytest.raises(ValidationError):
        projects.create_project(make_project(daysToDue=-(10 ** 20)))

    projects.create_project(make_project())
    assert [p['id'] for p in projects.list_projects()] == ['PRJ-100']


def test_failed_commit_is_rolled_back(app):
    db.session.add(Project(id='PRJ-901', name='Too far out', days_to_due=10 ** 20))
    with pytest.raises(Exception):
        commit_or_raise('creating project PRJ-901')

    assert projects.list_projects() == []
    projects.create_project(make_project())
    assert projects.get_project('PRJ-100') is not None
