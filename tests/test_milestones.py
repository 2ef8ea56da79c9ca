import re

import pytest

from app.errors import ConstraintViolation, ValidationError
from app.services import milestones, projects, team_members

from conftest import make_milestone, make_project

GENERATED_ID = re.compile(r'^ms\d+-[0-9a-z]+$')


@pytest.fixture()
def project(app):
    projects.create_project(make_project())
    return 'PRJ-100'


def test_blank_id_is_generated(project):
    result = milestones.create_milestone(make_milestone(id='   '))

    assert GENERATED_ID.match(result['id'])
    assert milestones.get_milestone(result['id'])['name'] == 'Kickoff'


def test_missing_id_is_generated(project):
    data = make_milestone()
    del data['id']

    result = milestones.create_milestone(data)
    assert GENERATED_ID.match(result['id'])


def test_generated_ids_are_unique(project):
    ids = {milestones.create_milestone(make_milestone())['id'] for _ in range(20)}

    assert len(ids) == 20
    assert all(GENERATED_ID.match(milestone_id) for milestone_id in ids)


def test_explicit_id_is_kept(project):
    assert milestones.create_milestone(make_milestone(id='ms-kickoff')) == {'id': 'ms-kickoff'}
    with pytest.raises(ConstraintViolation):
        milestones.create_milestone(make_milestone(id='ms-kickoff'))


def test_new_milestone_lists_with_empty_links(project):
    result = milestones.create_milestone(make_milestone(id=''))

    listed = milestones.list_milestones_by_project('PRJ-100')
    assert len(listed) == 1
    assert listed[0]['id'] == result['id']
    assert listed[0]['projectName'] == 'Test'
    assert listed[0]['assignees'] == []
    assert listed[0]['dependencies'] == []


def test_create_ignores_derived_lists(project):
    result = milestones.create_milestone(make_milestone(assignees=['Someone'], dependencies=['ms1']))

    milestone = milestones.get_milestone(result['id'])
    assert milestone['assignees'] == []
    assert milestone['dependencies'] == []


def test_unknown_project_is_a_constraint_violation(app):
    with pytest.raises(ConstraintViolation):
        milestones.create_milestone(make_milestone(projectId='PRJ-404'))


@pytest.mark.parametrize('field, value', [
    ('status', 'cancelled'),
    ('priority', 'urgent'),
    ('endDate', 'next week'),
])
def test_malformed_fields_are_rejected(project, field, value):
    with pytest.raises(ValidationError):
        milestones.create_milestone(make_milestone(**{field: value}))


def test_reads_reshape_assignee_names_and_dependency_ids(seeded_app):
    milestone = milestones.get_milestone('ms2')

    assert milestone['projectId'] == 'PRJ-002'
    assert milestone['projectName'] == 'Customer Portal Redesign'
    assert milestone['assignees'] == ['Lisa Wang', 'David Smith']
    assert milestone['dependencies'] == ['ms1']
    assert milestone['status'] == 'in-progress'


def test_list_is_ordered_by_start_date(seeded_app):
    listed = milestones.list_milestones()

    start_dates = [m['startDate'] for m in listed]
    assert start_dates == sorted(start_dates)
    assert listed[0]['id'] == 'ms2'
    assert len(listed) == 8


def test_list_by_project_filters(seeded_app):
    listed = milestones.list_milestones_by_project('PRJ-004')

    assert [m['id'] for m in listed] == ['ms4']
    assert listed[0]['assignees'] == ['Jennifer Kim', 'Sarah Johnson']


def test_get_missing_milestone_returns_none(app):
    assert milestones.get_milestone('ms404') is None


def test_update_replaces_scalars_and_keeps_links(seeded_app):
    existing = milestones.get_milestone('ms4')
    merged = {**existing, 'status': 'delayed', 'progress': 10, 'assignees': ['Nobody']}

    assert milestones.update_milestone(merged) is True

    updated = milestones.get_milestone('ms4')
    assert updated['status'] == 'delayed'
    assert updated['progress'] == 10
    assert updated['assignees'] == ['Jennifer Kim', 'Sarah Johnson']
    assert updated['dependencies'] == ['ms2']
    assert updated['updatedAt'] != existing['updatedAt']


def test_update_can_move_milestone_to_another_project(seeded_app):
    milestones.update_milestone({**milestones.get_milestone('ms8'), 'projectId': 'PRJ-001'})

    assert [m['id'] for m in milestones.list_milestones_by_project('PRJ-008')] == []
    assert 'ms8' in [m['id'] for m in milestones.list_milestones_by_project('PRJ-001')]


def test_update_missing_milestone_is_a_no_op(project):
    assert milestones.update_milestone(make_milestone(id='ms404')) is False


def test_delete_removes_dependency_rows_on_both_sides(seeded_app):
    assert milestones.delete_milestone('ms2') is True

    assert milestones.get_milestone('ms2') is None
    # ms4 depended on ms2
    assert milestones.get_milestone('ms4')['dependencies'] == []
    assert milestones.get_milestone('ms1')['dependencies'] == []


def test_delete_missing_milestone_is_a_no_op(app):
    assert milestones.delete_milestone('ms404') is False


def test_link_functions_feed_the_reshaped_view(project):
    team_members.create_team_member({'id': 'tm-a', 'name': 'Ada Lovelace'})
    first = milestones.create_milestone(make_milestone(id='ms-a'))['id']
    second = milestones.create_milestone(make_milestone(id='ms-b', startDate='2024-03-01'))['id']

    milestones.add_assignee(second, 'tm-a')
    milestones.add_dependency(second, first)

    milestone = milestones.get_milestone(second)
    assert milestone['assignees'] == ['Ada Lovelace']
    assert milestone['dependencies'] == ['ms-a']


def test_milestone_cannot_depend_on_itself(project):
    milestones.create_milestone(make_milestone(id='ms-a'))
    with pytest.raises(ValidationError):
        milestones.add_dependency('ms-a', 'ms-a')
