"""Pytest fixtures: every test gets its own app bound to a fresh SQLite file"""
from pathlib import Path

import pytest

from app import create_app
from app.seed import seed_database
from app.storage import shutdown


def make_project(**overrides):
    project = {
        'id': 'PRJ-100',
        'name': 'Test',
        'description': 'Test project',
        'sponsor': 'Jane Doe, COO',
        'projectManager': 'John Roe',
        'startDate': '2024-01-01',
        'endDate': '2024-12-31',
        'progress': 10,
        'nextMilestone': 'Kickoff',
        'milestoneDate': '2024-02-01',
        'status': 'on-track',
        'healthScore': 80,
        'daysToDue': -3,
        'budgetPlanned': 1000,
        'budgetActual': 400,
        'riskLevel': 'low',
        'topRisks': 'None yet',
        'keyDependencies': 'Budget approval',
        'coreTeam': '3 members',
        'resourceLoad': 110,
        'lastUpdated': '2024-01-05',
        'nextSteeringCommittee': '2024-02-15',
        'stakeholders': 'Finance, IT',
    }
    project.update(overrides)
    return project


def make_milestone(**overrides):
    milestone = {
        'id': '',
        'projectId': 'PRJ-100',
        'name': 'Kickoff',
        'description': 'Project kickoff',
        'startDate': '2024-02-01',
        'endDate': '2024-02-10',
        'progress': 0,
        'status': 'upcoming',
        'priority': 'medium',
    }
    milestone.update(overrides)
    return milestone


@pytest.fixture()
def app(tmp_path: Path):
    app = create_app('testing', {'SQLALCHEMY_DATABASE_URI': f'sqlite:///{tmp_path / "test.db"}'})
    ctx = app.app_context()
    ctx.push()
    try:
        yield app
    finally:
        shutdown()
        ctx.pop()


@pytest.fixture()
def seeded_app(app):
    seed_database()
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def runner(app):
    return app.test_cli_runner()
