"""Sample portfolio inserted into an empty store.

Every milestone's projectId and every allocation, assignee and dependency
reference resolves to a row in this dataset.
"""
import logging

from app.extensions import db
from app.models import (Project, TeamMember, TeamMemberProject, ResourceUtilization,
                        Milestone, MilestoneAssignee, MilestoneDependency, UTILIZATION_WEEKS)
from app.services.common import parse_fields
from app.storage import run_atomic

logger = logging.getLogger(__name__)

SEED_ALLOCATION = 50
SEED_ASSIGNEE_ROLE = 'Team Member'

SEED_PROJECTS = [
    {
        'id': 'PRJ-001', 'name': 'Digital Transformation Initiative',
        'description': 'Modernize legacy systems and implement cloud infrastructure',
        'sponsor': 'Sarah Johnson, CTO', 'projectManager': 'Mike Chen',
        'startDate': '2024-01-15', 'endDate': '2024-12-31', 'progress': 65,
        'nextMilestone': 'Phase 2 Deployment', 'milestoneDate': '2024-08-15',
        'status': 'on-track', 'healthScore': 85, 'daysToDue': 45,
        'budgetPlanned': 2500000, 'budgetActual': 1800000, 'riskLevel': 'medium',
        'topRisks': 'Integration complexity with legacy systems',
        'keyDependencies': 'Vendor delivery timeline', 'coreTeam': '12 members',
        'resourceLoad': 78, 'lastUpdated': '2024-07-01', 'nextSteeringCommittee': '2024-07-15',
        'stakeholders': 'IT, Operations, Finance',
    },
    {
        'id': 'PRJ-002', 'name': 'Customer Portal Redesign',
        'description': 'Redesign customer-facing portal with improved UX',
        'sponsor': 'David Smith, VP Marketing', 'projectManager': 'Lisa Wang',
        'startDate': '2024-03-01', 'endDate': '2024-09-30', 'progress': 40,
        'nextMilestone': 'User Testing Phase', 'milestoneDate': '2024-07-20',
        'status': 'at-risk', 'healthScore': 65, 'daysToDue': 92,
        'budgetPlanned': 800000, 'budgetActual': 450000, 'riskLevel': 'high',
        'topRisks': 'User feedback integration delays',
        'keyDependencies': 'Design system completion', 'coreTeam': '8 members',
        'resourceLoad': 92, 'lastUpdated': '2024-07-02', 'nextSteeringCommittee': '2024-07-10',
        'stakeholders': 'Marketing, Product, Customer Success',
    },
    {
        'id': 'PRJ-003', 'name': 'Data Analytics Platform',
        'description': 'Build comprehensive analytics and reporting platform',
        'sponsor': 'Emily Davis, VP Data', 'projectManager': 'Alex Rodriguez',
        'startDate': '2024-02-01', 'endDate': '2024-11-30', 'progress': 25,
        'nextMilestone': 'Data Pipeline Setup', 'milestoneDate': '2024-08-01',
        'status': 'blocked', 'healthScore': 35, 'daysToDue': 152,
        'budgetPlanned': 1200000, 'budgetActual': 300000, 'riskLevel': 'high',
        'topRisks': 'Data governance approval pending',
        'keyDependencies': 'Security team sign-off', 'coreTeam': '6 members',
        'resourceLoad': 45, 'lastUpdated': '2024-06-28', 'nextSteeringCommittee': '2024-07-08',
        'stakeholders': 'Data, Security, Legal',
    },
    {
        'id': 'PRJ-004', 'name': 'Mobile App Development',
        'description': 'Develop native mobile applications for iOS and Android',
        'sponsor': 'Robert Wilson, VP Product', 'projectManager': 'Jennifer Kim',
        'startDate': '2024-04-01', 'endDate': '2024-10-31', 'progress': 55,
        'nextMilestone': 'Beta Testing', 'milestoneDate': '2024-08-30',
        'status': 'on-track', 'healthScore': 90, 'daysToDue': 123,
        'budgetPlanned': 1500000, 'budgetActual': 850000, 'riskLevel': 'low',
        'topRisks': 'App store approval process',
        'keyDependencies': 'Third-party API integration', 'coreTeam': '10 members',
        'resourceLoad': 85, 'lastUpdated': '2024-07-03', 'nextSteeringCommittee': '2024-07-20',
        'stakeholders': 'Product, Engineering, QA',
    },
    {
        'id': 'PRJ-005', 'name': 'Security Infrastructure Upgrade',
        'description': 'Implement advanced security measures and compliance framework',
        'sponsor': 'Michael Brown, CISO', 'projectManager': 'Tom Anderson',
        'startDate': '2024-01-01', 'endDate': '2024-08-31', 'progress': 80,
        'nextMilestone': 'Final Security Audit', 'milestoneDate': '2024-08-15',
        'status': 'on-track', 'healthScore': 95, 'daysToDue': 59,
        'budgetPlanned': 900000, 'budgetActual': 720000, 'riskLevel': 'low',
        'topRisks': 'Regulatory compliance updates',
        'keyDependencies': 'External auditor availability', 'coreTeam': '5 members',
        'resourceLoad': 60, 'lastUpdated': '2024-07-01', 'nextSteeringCommittee': '2024-07-12',
        'stakeholders': 'Security, Legal, Compliance',
    },
    {
        'id': 'PRJ-006', 'name': 'ERP System Implementation',
        'description': 'Implement new enterprise resource planning system',
        'sponsor': 'Patricia Garcia, CFO', 'projectManager': "Kevin O'Brien",
        'startDate': '2024-05-01', 'endDate': '2024-12-31', 'progress': 15,
        'nextMilestone': 'Requirements Gathering', 'milestoneDate': '2024-08-30',
        'status': 'at-risk', 'healthScore': 55, 'daysToDue': 178,
        'budgetPlanned': 3000000, 'budgetActual': 200000, 'riskLevel': 'high',
        'topRisks': 'Vendor selection delays',
        'keyDependencies': 'Stakeholder alignment', 'coreTeam': '15 members',
        'resourceLoad': 70, 'lastUpdated': '2024-07-01', 'nextSteeringCommittee': '2024-07-18',
        'stakeholders': 'Finance, Operations, IT',
    },
    {
        'id': 'PRJ-007', 'name': 'AI-Powered Customer Service',
        'description': 'Implement AI chatbot and automated customer support system',
        'sponsor': 'Rachel Lee, VP Customer Success', 'projectManager': 'Marcus Johnson',
        'startDate': '2024-06-01', 'endDate': '2024-11-30', 'progress': 10,
        'nextMilestone': 'AI Model Training', 'milestoneDate': '2024-09-15',
        'status': 'on-track', 'healthScore': 75, 'daysToDue': 152,
        'budgetPlanned': 800000, 'budgetActual': 80000, 'riskLevel': 'medium',
        'topRisks': 'AI model accuracy requirements',
        'keyDependencies': 'Data pipeline completion', 'coreTeam': '8 members',
        'resourceLoad': 95, 'lastUpdated': '2024-07-02', 'nextSteeringCommittee': '2024-07-25',
        'stakeholders': 'Customer Success, Product, Engineering',
    },
    {
        'id': 'PRJ-008', 'name': 'Office Expansion Project',
        'description': 'Expand office space and modernize workplace facilities',
        'sponsor': 'James Wilson, VP Operations', 'projectManager': 'Sofia Rodriguez',
        'startDate': '2024-07-01', 'endDate': '2024-10-31', 'progress': 5,
        'nextMilestone': 'Furniture Installation', 'milestoneDate': '2024-09-01',
        'status': 'on-track', 'healthScore': 85, 'daysToDue': 123,
        'budgetPlanned': 500000, 'budgetActual': 25000, 'riskLevel': 'low',
        'topRisks': 'Construction permit delays',
        'keyDependencies': 'Landlord approval', 'coreTeam': '4 members',
        'resourceLoad': 55, 'lastUpdated': '2024-07-01', 'nextSteeringCommittee': '2024-07-30',
        'stakeholders': 'Operations, HR, Facilities',
    },
]

SEED_TEAM_MEMBERS = [
    {'id': 'tm1', 'name': 'Sarah Johnson', 'role': 'Senior Developer', 'department': 'Engineering',
     'capacity': 40, 'currentLoad': 85, 'projects': ['PRJ-001', 'PRJ-004']},
    {'id': 'tm2', 'name': 'Mike Chen', 'role': 'Project Manager', 'department': 'PMO',
     'capacity': 40, 'currentLoad': 92, 'projects': ['PRJ-001']},
    {'id': 'tm3', 'name': 'Lisa Wang', 'role': 'UX Designer', 'department': 'Design',
     'capacity': 40, 'currentLoad': 78, 'projects': ['PRJ-002']},
    {'id': 'tm4', 'name': 'Alex Rodriguez', 'role': 'Data Engineer', 'department': 'Data',
     'capacity': 40, 'currentLoad': 45, 'projects': ['PRJ-003']},
    {'id': 'tm5', 'name': 'Jennifer Kim', 'role': 'Mobile Developer', 'department': 'Engineering',
     'capacity': 40, 'currentLoad': 88, 'projects': ['PRJ-004']},
    {'id': 'tm6', 'name': 'Tom Anderson', 'role': 'Security Engineer', 'department': 'Security',
     'capacity': 40, 'currentLoad': 60, 'projects': ['PRJ-005']},
    {'id': 'tm7', 'name': "Kevin O'Brien", 'role': 'Business Analyst', 'department': 'PMO',
     'capacity': 40, 'currentLoad': 70, 'projects': ['PRJ-006']},
    {'id': 'tm8', 'name': 'Marcus Johnson', 'role': 'AI Engineer', 'department': 'Engineering',
     'capacity': 40, 'currentLoad': 95, 'projects': ['PRJ-007']},
    {'id': 'tm9', 'name': 'Sofia Rodriguez', 'role': 'Facilities Manager', 'department': 'Operations',
     'capacity': 40, 'currentLoad': 55, 'projects': ['PRJ-008']},
    {'id': 'tm10', 'name': 'David Smith', 'role': 'Marketing Manager', 'department': 'Marketing',
     'capacity': 40, 'currentLoad': 82, 'projects': ['PRJ-002']},
]

# One value per entry of UTILIZATION_WEEKS
SEED_UTILIZATION = {
    'tm1': [85, 88, 90, 92, 85, 88, 90, 92],
    'tm2': [92, 95, 98, 100, 92, 95, 98, 100],
    'tm3': [78, 80, 82, 85, 78, 80, 82, 85],
    'tm4': [45, 50, 55, 60, 45, 50, 55, 60],
    'tm5': [88, 90, 92, 95, 88, 90, 92, 95],
    'tm6': [60, 65, 70, 75, 60, 65, 70, 75],
    'tm7': [70, 72, 75, 78, 70, 72, 75, 78],
    'tm8': [95, 98, 100, 100, 95, 98, 100, 100],
    'tm9': [55, 58, 60, 62, 55, 58, 60, 62],
    'tm10': [82, 85, 88, 90, 82, 85, 88, 90],
}

SEED_MILESTONES = [
    {'id': 'ms1', 'projectId': 'PRJ-001', 'name': 'Phase 2 Deployment',
     'description': 'Deploy cloud infrastructure and migrate legacy systems',
     'startDate': '2024-08-15', 'endDate': '2024-09-15', 'progress': 0,
     'status': 'upcoming', 'priority': 'high', 'assignees': ['tm1', 'tm2'], 'dependencies': []},
    {'id': 'ms2', 'projectId': 'PRJ-002', 'name': 'User Testing Phase',
     'description': 'Conduct comprehensive user testing and feedback collection',
     'startDate': '2024-07-20', 'endDate': '2024-08-20', 'progress': 25,
     'status': 'in-progress', 'priority': 'high', 'assignees': ['tm3', 'tm10'], 'dependencies': ['ms1']},
    {'id': 'ms3', 'projectId': 'PRJ-003', 'name': 'Data Pipeline Setup',
     'description': 'Set up data ingestion and processing pipelines',
     'startDate': '2024-08-01', 'endDate': '2024-09-01', 'progress': 0,
     'status': 'upcoming', 'priority': 'medium', 'assignees': ['tm4'], 'dependencies': []},
    {'id': 'ms4', 'projectId': 'PRJ-004', 'name': 'Beta Testing',
     'description': 'Launch beta version and collect user feedback',
     'startDate': '2024-08-30', 'endDate': '2024-09-30', 'progress': 0,
     'status': 'upcoming', 'priority': 'high', 'assignees': ['tm5', 'tm1'], 'dependencies': ['ms2']},
    {'id': 'ms5', 'projectId': 'PRJ-005', 'name': 'Final Security Audit',
     'description': 'Complete comprehensive security audit and compliance review',
     'startDate': '2024-08-15', 'endDate': '2024-08-31', 'progress': 0,
     'status': 'upcoming', 'priority': 'high', 'assignees': ['tm6'], 'dependencies': []},
    {'id': 'ms6', 'projectId': 'PRJ-006', 'name': 'Requirements Gathering',
     'description': 'Complete stakeholder requirements and vendor selection',
     'startDate': '2024-08-30', 'endDate': '2024-09-30', 'progress': 0,
     'status': 'upcoming', 'priority': 'medium', 'assignees': ['tm7'], 'dependencies': []},
    {'id': 'ms7', 'projectId': 'PRJ-007', 'name': 'AI Model Training',
     'description': 'Train and optimize AI models for customer service chatbot',
     'startDate': '2024-09-15', 'endDate': '2024-10-15', 'progress': 0,
     'status': 'upcoming', 'priority': 'medium', 'assignees': ['tm8'], 'dependencies': ['ms3']},
    {'id': 'ms8', 'projectId': 'PRJ-008', 'name': 'Furniture Installation',
     'description': 'Install and configure new office furniture and equipment',
     'startDate': '2024-09-01', 'endDate': '2024-09-15', 'progress': 0,
     'status': 'upcoming', 'priority': 'low', 'assignees': ['tm9'], 'dependencies': []},
]


def _insert_projects():
    for data in SEED_PROJECTS:
        db.session.add(Project(id=data['id'], **parse_fields(data, Project.FIELDS)))
    db.session.flush()


def _insert_team_members():
    for data in SEED_TEAM_MEMBERS:
        db.session.add(TeamMember(id=data['id'], **parse_fields(data, TeamMember.FIELDS)))

        for project_id in data['projects']:
            db.session.add(TeamMemberProject(team_member_id=data['id'], project_id=project_id,
                                             allocation=SEED_ALLOCATION))

        for week, utilization in zip(UTILIZATION_WEEKS, SEED_UTILIZATION[data['id']]):
            db.session.add(ResourceUtilization(team_member_id=data['id'], week=week,
                                               utilization=utilization))
    db.session.flush()


def _insert_milestones():
    for data in SEED_MILESTONES:
        db.session.add(Milestone(id=data['id'], **parse_fields(data, Milestone.FIELDS)))
    db.session.flush()

    for data in SEED_MILESTONES:
        for member_id in data['assignees']:
            db.session.add(MilestoneAssignee(milestone_id=data['id'], team_member_id=member_id,
                                             role=SEED_ASSIGNEE_ROLE))
        for dependency_id in data['dependencies']:
            db.session.add(MilestoneDependency(milestone_id=data['id'], dependency_id=dependency_id))
    db.session.flush()


def seed_database():
    """Insert the sample portfolio in a single transaction"""
    run_atomic([_insert_projects, _insert_team_members, _insert_milestones])
    logger.info('Seeded %d projects, %d team members and %d milestones',
                len(SEED_PROJECTS), len(SEED_TEAM_MEMBERS), len(SEED_MILESTONES))
