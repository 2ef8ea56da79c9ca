import logging

from flask import Flask, jsonify
from config import config
from app.extensions import db, cors

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'


def configure_logging(app):
    level_name = str(app.config.get('LOG_LEVEL', 'INFO')).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    logging.getLogger('app').setLevel(level)
    app.logger.setLevel(level)


def create_app(config_name='default', overrides=None):
    """Application factory pattern"""
    app = Flask(__name__)

    # Load configuration
    app.config.from_object(config[config_name])
    if overrides:
        app.config.update(overrides)
    config[config_name].init_app(app)
    configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    cors.init_app(app)  # Allow all domains for all routes

    # Import models to ensure they're registered with SQLAlchemy
    from app.models import (
        Project, TeamMember, TeamMemberProject, ResourceUtilization,
        Milestone, MilestoneAssignee, MilestoneDependency
    )
    from app.errors import ValidationError, ConstraintViolation
    from app.storage import initialize
    from app.cli import db_cli

    # Register blueprints
    from app.routes import (
        projects_bp, milestones_bp, team_members_bp, share_bp, utils_bp
    )

    app.register_blueprint(projects_bp)
    app.register_blueprint(milestones_bp)
    app.register_blueprint(team_members_bp)
    app.register_blueprint(share_bp)
    app.register_blueprint(utils_bp)

    app.cli.add_command(db_cli)

    # Error handlers
    @app.errorhandler(ValidationError)
    def validation_error(error):
        return jsonify({'error': str(error)}), 400

    @app.errorhandler(ConstraintViolation)
    def constraint_violation(error):
        return jsonify({'error': str(error)}), 409

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Resource not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        app.logger.error('Unhandled error: %s', getattr(error, 'original_exception', error))
        return jsonify({'error': 'Internal server error'}), 500

    # Create database tables, seeding an empty store
    with app.app_context():
        initialize()

    return app
