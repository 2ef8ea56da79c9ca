import json

from app.services import aggregation


def test_status_reports_counts(seeded_app, runner):
    result = runner.invoke(args=['db', 'status'])

    assert result.exit_code == 0
    assert 'Projects: 8' in result.output
    assert 'Team Members: 10' in result.output
    assert 'Milestones: 8' in result.output


def test_clear_keeps_tables(seeded_app, runner):
    result = runner.invoke(args=['db', 'clear'])

    assert result.exit_code == 0
    assert aggregation.get_stats()['total'] == 0
    assert 'Projects: 0' in runner.invoke(args=['db', 'status']).output


def test_seed_replaces_existing_data(seeded_app, runner):
    result = runner.invoke(args=['db', 'seed'])

    assert result.exit_code == 0
    assert aggregation.get_stats() == {'total': 8, 'onTrack': 5, 'atRisk': 2, 'blocked': 1}


def test_init_leaves_store_empty(runner):
    result = runner.invoke(args=['db', 'init'])

    assert result.exit_code == 0
    assert aggregation.get_stats()['total'] == 0


def test_reset_recreates_sample_data(seeded_app, runner):
    runner.invoke(args=['db', 'clear'])

    result = runner.invoke(args=['db', 'reset'])

    assert result.exit_code == 0
    assert aggregation.get_stats()['total'] == 8


def test_view_prints_projects(seeded_app, runner):
    result = runner.invoke(args=['db', 'view'])

    assert result.exit_code == 0
    assert 'Total Projects: 8' in result.output
    assert 'PRJ-006 - ERP System Implementation' in result.output
    assert 'Spent: 6.7%' in result.output


def test_export_writes_json_files(seeded_app, runner, tmp_path):
    output = tmp_path / 'export'

    result = runner.invoke(args=['db', 'export', '--output', str(output)])

    assert result.exit_code == 0
    exported = json.loads((output / 'projects.json').read_text(encoding='utf-8'))
    assert len(exported) == 8
    members = json.loads((output / 'team-members.json').read_text(encoding='utf-8'))
    assert members[0]['name'] == 'Alex Rodriguez'
    milestones = json.loads((output / 'milestones.json').read_text(encoding='utf-8'))
    assert milestones[0]['id'] == 'ms2'


def test_clear_milestones_keeps_projects(seeded_app, runner):
    result = runner.invoke(args=['db', 'clear-milestones'])

    assert result.exit_code == 0
    output = runner.invoke(args=['db', 'status']).output
    assert 'Milestones: 0' in output
    assert 'Projects: 8' in output
    assert 'Team Members: 10' in output
