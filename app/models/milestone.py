from app.extensions import db
from app.models.enums import MilestoneStatus, Priority, enum_type
from app.models.fields import (FieldSpec, TEXT, DATE, PERCENT,
                               serialize_fields, serialize_timestamps)
from app.clock import utcnow


class Milestone(db.Model):
    __tablename__ = 'milestones'

    id = db.Column(db.String(64), primary_key=True)
    project_id = db.Column('projectId', db.String(50),
                           db.ForeignKey('projects.id', ondelete='CASCADE'), nullable=False, index=True)
    name = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text)
    start_date = db.Column('startDate', db.String(10))
    end_date = db.Column('endDate', db.String(10))
    progress = db.Column(db.Integer)
    status = db.Column(enum_type(MilestoneStatus, 'milestone_status'))
    priority = db.Column(enum_type(Priority, 'milestone_priority'))
    created_at = db.Column('createdAt', db.DateTime, default=utcnow)
    updated_at = db.Column('updatedAt', db.DateTime, default=utcnow)

    # Relationships
    assignee_links = db.relationship('MilestoneAssignee', backref='milestone', lazy=True,
                                     cascade='all, delete-orphan', passive_deletes=True)
    # Milestones this one waits on
    dependency_links = db.relationship('MilestoneDependency', foreign_keys='MilestoneDependency.milestone_id',
                                       backref='milestone', lazy=True,
                                       cascade='all, delete-orphan', passive_deletes=True)
    # Milestones waiting on this one; removed along with it
    dependent_links = db.relationship('MilestoneDependency', foreign_keys='MilestoneDependency.dependency_id',
                                      backref='dependency', lazy=True,
                                      cascade='all, delete-orphan', passive_deletes=True)

    FIELDS = (
        FieldSpec('projectId', 'project_id', TEXT),
        FieldSpec('name', 'name', TEXT),
        FieldSpec('description', 'description', TEXT),
        FieldSpec('startDate', 'start_date', DATE),
        FieldSpec('endDate', 'end_date', DATE),
        FieldSpec('progress', 'progress', PERCENT),
        FieldSpec('status', 'status', MilestoneStatus),
        FieldSpec('priority', 'priority', Priority),
    )

    def to_dict(self, project_name=None, assignees=(), dependencies=()):
        data = {'id': self.id}
        data.update(serialize_fields(self, self.FIELDS))
        data['projectName'] = project_name
        data['assignees'] = list(assignees)
        data['dependencies'] = list(dependencies)
        data.update(serialize_timestamps(self))
        return data


class MilestoneAssignee(db.Model):
    __tablename__ = 'milestone_assignees'

    id = db.Column(db.Integer, primary_key=True)
    milestone_id = db.Column('milestoneId', db.String(64),
                             db.ForeignKey('milestones.id', ondelete='CASCADE'), nullable=False)
    team_member_id = db.Column('teamMemberId', db.String(50),
                               db.ForeignKey('team_members.id', ondelete='CASCADE'), nullable=False)
    role = db.Column(db.String(100))

    __table_args__ = (db.UniqueConstraint('milestoneId', 'teamMemberId', name='unique_milestone_assignee'),)


class MilestoneDependency(db.Model):
    __tablename__ = 'milestone_dependencies'

    id = db.Column(db.Integer, primary_key=True)
    milestone_id = db.Column('milestoneId', db.String(64),
                             db.ForeignKey('milestones.id', ondelete='CASCADE'), nullable=False)
    dependency_id = db.Column('dependencyId', db.String(64),
                              db.ForeignKey('milestones.id', ondelete='CASCADE'), nullable=False)

    __table_args__ = (db.UniqueConstraint('milestoneId', 'dependencyId', name='unique_milestone_dependency'),)
