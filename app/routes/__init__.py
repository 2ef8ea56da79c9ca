from .projects import projects_bp
from .milestones import milestones_bp
from .team_members import team_members_bp
from .share import share_bp
from .utils import utils_bp

__all__ = [
    'projects_bp', 'milestones_bp', 'team_members_bp', 'share_bp', 'utils_bp'
]
