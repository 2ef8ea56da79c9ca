"""``flask db <action>`` commands for managing the portfolio store."""
import json
from pathlib import Path

import click
from flask.cli import AppGroup

from app.extensions import db
from app.services import aggregation, milestones, projects, team_members
from app.storage import clear_all_data, clear_milestone_data, initialize, table_counts

db_cli = AppGroup('db', help='Manage the portfolio database.')


@db_cli.command('init')
def init_command():
    """Create the tables without adding sample data."""
    initialize(seed=False)
    click.echo('Database initialized with empty tables')


@db_cli.command('seed')
def seed_command():
    """Replace all data with the sample portfolio."""
    from app.seed import seed_database

    clear_all_data()
    seed_database()
    click.echo('Sample data added to database')


@db_cli.command('clear')
def clear_command():
    """Remove all data but keep the tables."""
    clear_all_data()
    click.echo('All data cleared from database')


@db_cli.command('clear-milestones')
def clear_milestones_command():
    """Remove every milestone, keeping projects and team members."""
    clear_milestone_data()
    click.echo('All milestones cleared from database')


@db_cli.command('reset')
def reset_command():
    """Drop and recreate every table, then seed the sample portfolio."""
    db.drop_all()
    initialize(seed=True)
    click.echo('Database reset with sample data')


@db_cli.command('status')
def status_command():
    """Show row counts."""
    counts = table_counts()
    click.echo('Database Status:')
    click.echo(f"   Projects: {counts['projects']}")
    click.echo(f"   Team Members: {counts['teamMembers']}")
    click.echo(f"   Milestones: {counts['milestones']}")
    click.echo(f'   Database: {db.engine.url}')


@db_cli.command('view')
def view_command():
    """Print portfolio statistics and a line per project."""
    stats = aggregation.get_stats()
    click.echo(f"Total Projects: {stats['total']}")
    click.echo(f"On Track: {stats['onTrack']}")
    click.echo(f"At Risk: {stats['atRisk']}")
    click.echo(f"Blocked: {stats['blocked']}")
    click.echo('')

    for index, project in enumerate(projects.list_projects(), start=1):
        spent = aggregation.percent_spent(project)
        click.echo(f"{index}. {project['id']} - {project['name']}")
        click.echo(f"   Status: {project['status']} | Progress: {project['progress']}% "
                   f"| Health: {project['healthScore']}")
        click.echo(f"   Budget: {project['budgetPlanned'] or 0:,.0f} | Actual: {project['budgetActual'] or 0:,.0f} "
                   f"| Spent: {'N/A' if spent is None else f'{spent}%'}")


@db_cli.command('export')
@click.option('--output', '-o', default='data/export', show_default=True,
              type=click.Path(file_okay=False, path_type=Path),
              help='Directory receiving the JSON files.')
def export_command(output):
    """Write projects, team members and milestones to JSON files."""
    output.mkdir(parents=True, exist_ok=True)
    exports = {
        'projects.json': projects.list_projects(),
        'team-members.json': team_members.list_team_members(),
        'milestones.json': milestones.list_milestones(),
    }
    for filename, rows in exports.items():
        (output / filename).write_text(json.dumps(rows, indent=2), encoding='utf-8')
        click.echo(f'   {filename}: {len(rows)} records')
    click.echo(f'Data exported to {output}')
