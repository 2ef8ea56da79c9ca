from enum import Enum

from app.extensions import db


class ProjectStatus(Enum):
    ON_TRACK = "on-track"
    AT_RISK = "at-risk"
    BLOCKED = "blocked"

class RiskLevel(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class MilestoneStatus(Enum):
    COMPLETED = "completed"
    IN_PROGRESS = "in-progress"
    UPCOMING = "upcoming"
    DELAYED = "delayed"

class Priority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class ShareRole(Enum):
    VIEWER = "viewer"
    EDITOR = "editor"


def enum_type(enum_cls, name):
    """Column type storing the enum's values ("on-track"), not its member names"""
    return db.Enum(
        enum_cls,
        name=name,
        values_callable=lambda members: [m.value for m in members],
        create_constraint=True,
    )
