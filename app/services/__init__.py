from . import aggregation, milestones, notifications, projects, team_members

__all__ = ['aggregation', 'milestones', 'notifications', 'projects', 'team_members']
