"""Read-only views derived from the stored portfolio."""
from app.extensions import db
from app.models import Project, ProjectStatus, ResourceUtilization, UTILIZATION_WEEKS
from app.services.team_members import list_team_members


def get_stats():
    """Project counts by status"""
    rows = db.session.query(Project.status, db.func.count(Project.id)).group_by(Project.status).all()
    counts = {status: count for status, count in rows}
    return {
        'total': sum(counts.values()),
        'onTrack': counts.get(ProjectStatus.ON_TRACK, 0),
        'atRisk': counts.get(ProjectStatus.AT_RISK, 0),
        'blocked': counts.get(ProjectStatus.BLOCKED, 0),
    }


def get_utilization_data():
    """Dense member x week utilization matrix.

    Pairs with no stored row read as 0.
    """
    members = list_team_members()
    rows = db.session.query(
        ResourceUtilization.team_member_id, ResourceUtilization.week, ResourceUtilization.utilization
    ).all()
    facts = {(member_id, week): utilization for member_id, week, utilization in rows}

    utilization_data = {}
    for member in members:
        utilization_data[member['id']] = {
            week: facts.get((member['id'], week)) or 0 for week in UTILIZATION_WEEKS
        }

    return {
        'teamMembers': members,
        'weeks': list(UTILIZATION_WEEKS),
        'utilizationData': utilization_data,
    }


def budget_variance(project):
    return (project.get('budgetPlanned') or 0) - (project.get('budgetActual') or 0)


def percent_spent(project):
    """Share of the planned budget spent, to one decimal; None (shown as N/A) without a plan"""
    planned = project.get('budgetPlanned') or 0
    if not planned:
        return None
    return round((project.get('budgetActual') or 0) / planned * 100, 1)


def budget_summary(project):
    return {
        'planned': project.get('budgetPlanned'),
        'actual': project.get('budgetActual'),
        'variance': budget_variance(project),
        'percentSpent': percent_spent(project),
    }
