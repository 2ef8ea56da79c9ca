from app.extensions import db
from app.models.fields import FieldSpec, TEXT, INTEGER, serialize_fields, serialize_timestamps
from app.clock import utcnow

# Ordered labels of the utilization history
UTILIZATION_WEEKS = ('Week 1', 'Week 2', 'Week 3', 'Week 4',
                     'Week 5', 'Week 6', 'Week 7', 'Week 8')


class TeamMember(db.Model):
    __tablename__ = 'team_members'

    id = db.Column(db.String(50), primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    role = db.Column(db.String(100))
    department = db.Column(db.String(100))
    capacity = db.Column(db.Integer)  # hours per week
    current_load = db.Column('currentLoad', db.Integer)  # percent
    created_at = db.Column('createdAt', db.DateTime, default=utcnow)
    updated_at = db.Column('updatedAt', db.DateTime, default=utcnow)

    # Relationships
    project_allocations = db.relationship('TeamMemberProject', backref='team_member', lazy=True,
                                          cascade='all, delete-orphan', passive_deletes=True)
    utilization_entries = db.relationship('ResourceUtilization', backref='team_member', lazy=True,
                                          cascade='all, delete-orphan', passive_deletes=True)
    milestone_assignments = db.relationship('MilestoneAssignee', backref='team_member', lazy=True,
                                            cascade='all, delete-orphan', passive_deletes=True)

    FIELDS = (
        FieldSpec('name', 'name', TEXT),
        FieldSpec('role', 'role', TEXT),
        FieldSpec('department', 'department', TEXT),
        FieldSpec('capacity', 'capacity', INTEGER),
        FieldSpec('currentLoad', 'current_load', INTEGER),
    )

    def to_dict(self, projects=()):
        data = {'id': self.id}
        data.update(serialize_fields(self, self.FIELDS))
        data['projects'] = list(projects)
        data.update(serialize_timestamps(self))
        return data


class TeamMemberProject(db.Model):
    """Allocation of a team member to a project"""
    __tablename__ = 'team_member_projects'

    id = db.Column(db.Integer, primary_key=True)
    team_member_id = db.Column('teamMemberId', db.String(50),
                               db.ForeignKey('team_members.id', ondelete='CASCADE'), nullable=False)
    project_id = db.Column('projectId', db.String(50),
                           db.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False)
    allocation = db.Column(db.Integer)  # percent of the member's time

    __table_args__ = (db.UniqueConstraint('teamMemberId', 'projectId', name='unique_member_project'),)


class ResourceUtilization(db.Model):
    """Utilization of a team member for one week of the history"""
    __tablename__ = 'resource_utilization'

    id = db.Column(db.Integer, primary_key=True)
    team_member_id = db.Column('teamMemberId', db.String(50),
                               db.ForeignKey('team_members.id', ondelete='CASCADE'), nullable=False)
    week = db.Column(db.String(20), nullable=False)
    utilization = db.Column(db.Integer)  # percent, above 100 means overloaded

    __table_args__ = (db.UniqueConstraint('teamMemberId', 'week', name='unique_member_week'),)
