from .enums import ProjectStatus, RiskLevel, MilestoneStatus, Priority, ShareRole
from .project import Project
from .team_member import TeamMember, TeamMemberProject, ResourceUtilization, UTILIZATION_WEEKS
from .milestone import Milestone, MilestoneAssignee, MilestoneDependency

__all__ = [
    'ProjectStatus', 'RiskLevel', 'MilestoneStatus', 'Priority', 'ShareRole',
    'Project', 'TeamMember', 'TeamMemberProject', 'ResourceUtilization', 'UTILIZATION_WEEKS',
    'Milestone', 'MilestoneAssignee', 'MilestoneDependency'
]
