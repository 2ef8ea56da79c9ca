import pytest

from app.errors import ConstraintViolation, ValidationError
from app.services import aggregation, milestones, team_members


def test_list_is_ordered_by_name(seeded_app):
    names = [m['name'] for m in team_members.list_team_members()]

    assert names == sorted(names)
    assert len(names) == 10


def test_member_lists_its_project_ids(seeded_app):
    member = team_members.get_team_member('tm1')

    assert member['name'] == 'Sarah Johnson'
    assert member['currentLoad'] == 85
    assert member['projects'] == ['PRJ-001', 'PRJ-004']


def test_get_missing_member_returns_none(app):
    assert team_members.get_team_member('tm404') is None


def test_create_requires_id_and_name(app):
    with pytest.raises(ValidationError):
        team_members.create_team_member({'id': 'tm-x'})
    with pytest.raises(ValidationError):
        team_members.create_team_member({'name': 'No Id'})


def test_duplicate_member_is_a_constraint_violation(seeded_app):
    with pytest.raises(ConstraintViolation):
        team_members.create_team_member({'id': 'tm1', 'name': 'Someone Else'})
    assert team_members.get_team_member('tm1')['name'] == 'Sarah Johnson'


def test_new_member_has_no_projects(app):
    team_members.create_team_member({'id': 'tm-x', 'name': 'Grace Hopper', 'capacity': '40'})

    member = team_members.get_team_member('tm-x')
    assert member['projects'] == []
    assert member['capacity'] == 40


def test_assign_to_project(seeded_app):
    team_members.assign_to_project('tm4', 'PRJ-005', allocation=25)

    assert team_members.get_team_member('tm4')['projects'] == ['PRJ-003', 'PRJ-005']


def test_assigning_twice_is_a_constraint_violation(seeded_app):
    with pytest.raises(ConstraintViolation):
        team_members.assign_to_project('tm1', 'PRJ-001')


def test_assigning_to_unknown_project_is_a_constraint_violation(seeded_app):
    with pytest.raises(ConstraintViolation):
        team_members.assign_to_project('tm1', 'PRJ-404')


def test_record_utilization_replaces_existing_week(seeded_app):
    team_members.record_utilization('tm1', 'Week 1', 120)
    team_members.record_utilization('tm1', 'Week 1', 110)

    data = aggregation.get_utilization_data()
    assert data['utilizationData']['tm1']['Week 1'] == 110


def test_record_utilization_rejects_unknown_week(seeded_app):
    with pytest.raises(ValidationError):
        team_members.record_utilization('tm1', 'Week 9', 50)


def test_record_utilization_rejects_non_integer(seeded_app):
    with pytest.raises(ValidationError):
        team_members.record_utilization('tm1', 'Week 2', 'busy')


def test_delete_member_removes_dependent_rows(seeded_app):
    assert team_members.delete_team_member('tm3') is True

    assert team_members.get_team_member('tm3') is None
    data = aggregation.get_utilization_data()
    assert 'tm3' not in data['utilizationData']
    assert 'tm3' not in [m['id'] for m in data['teamMembers']]
    assert milestones.get_milestone('ms2')['assignees'] == ['David Smith']


def test_delete_missing_member_is_a_no_op(app):
    assert team_members.delete_team_member('tm404') is False
