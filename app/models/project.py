from app.extensions import db
from app.models.enums import ProjectStatus, RiskLevel, enum_type
from app.models.fields import (FieldSpec, TEXT, DATE, INTEGER, PERCENT, AMOUNT, TEAM,
                               serialize_fields, serialize_timestamps)
from app.clock import utcnow


class Project(db.Model):
    __tablename__ = 'projects'

    id = db.Column(db.String(50), primary_key=True)  # client supplied, e.g. PRJ-001
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    sponsor = db.Column(db.String(200))
    project_manager = db.Column('projectManager', db.String(200))
    start_date = db.Column('startDate', db.String(10))
    end_date = db.Column('endDate', db.String(10))
    progress = db.Column(db.Integer)
    next_milestone = db.Column('nextMilestone', db.String(200))
    milestone_date = db.Column('milestoneDate', db.String(10))
    status = db.Column(enum_type(ProjectStatus, 'project_status'))
    health_score = db.Column('healthScore', db.Integer)
    days_to_due = db.Column('daysToDue', db.Integer)  # negative once overdue
    budget_planned = db.Column('budgetPlanned', db.Float)
    budget_actual = db.Column('budgetActual', db.Float)
    risk_level = db.Column('riskLevel', enum_type(RiskLevel, 'risk_level'))
    top_risks = db.Column('topRisks', db.Text)
    key_dependencies = db.Column('keyDependencies', db.Text)
    core_team = db.Column('coreTeam', db.String(200))  # free text, e.g. "12 members"
    resource_load = db.Column('resourceLoad', db.Integer)
    last_updated = db.Column('lastUpdated', db.String(10))
    next_steering_committee = db.Column('nextSteeringCommittee', db.String(10))
    stakeholders = db.Column(db.Text)
    created_at = db.Column('createdAt', db.DateTime, default=utcnow)
    updated_at = db.Column('updatedAt', db.DateTime, default=utcnow)

    # Relationships
    milestones = db.relationship('Milestone', backref='project', lazy=True,
                                 cascade='all, delete-orphan', passive_deletes=True)
    team_allocations = db.relationship('TeamMemberProject', backref='project', lazy=True,
                                       cascade='all, delete-orphan', passive_deletes=True)

    # Client-writable columns; id is handled separately since it never changes
    FIELDS = (
        FieldSpec('name', 'name', TEXT),
        FieldSpec('description', 'description', TEXT),
        FieldSpec('sponsor', 'sponsor', TEXT),
        FieldSpec('projectManager', 'project_manager', TEXT),
        FieldSpec('startDate', 'start_date', DATE),
        FieldSpec('endDate', 'end_date', DATE),
        FieldSpec('progress', 'progress', PERCENT),
        FieldSpec('nextMilestone', 'next_milestone', TEXT),
        FieldSpec('milestoneDate', 'milestone_date', DATE),
        FieldSpec('status', 'status', ProjectStatus),
        FieldSpec('healthScore', 'health_score', PERCENT),
        FieldSpec('daysToDue', 'days_to_due', INTEGER),
        FieldSpec('budgetPlanned', 'budget_planned', AMOUNT),
        FieldSpec('budgetActual', 'budget_actual', AMOUNT),
        FieldSpec('riskLevel', 'risk_level', RiskLevel),
        FieldSpec('topRisks', 'top_risks', TEXT),
        FieldSpec('keyDependencies', 'key_dependencies', TEXT),
        FieldSpec('coreTeam', 'core_team', TEAM),
        FieldSpec('resourceLoad', 'resource_load', INTEGER),
        FieldSpec('lastUpdated', 'last_updated', DATE),
        FieldSpec('nextSteeringCommittee', 'next_steering_committee', DATE),
        FieldSpec('stakeholders', 'stakeholders', TEXT),
    )

    def to_dict(self):
        data = {'id': self.id}
        data.update(serialize_fields(self, self.FIELDS))
        data.update(serialize_timestamps(self))
        return data
