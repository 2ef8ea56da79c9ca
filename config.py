import os
from pathlib import Path

# Build paths inside the project
BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / 'data'


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Base configuration class"""
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'your-secret-key-here'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Populate the sample portfolio when the projects table is empty at startup
    SEED_ON_INIT = _env_flag('SEED_ON_INIT', True)

    # Share invitations
    APP_URL = os.environ.get('APP_URL', 'http://localhost:3000')
    SMTP_HOST = os.environ.get('SMTP_HOST', 'smtp.gmail.com')
    SMTP_PORT = int(os.environ.get('SMTP_PORT', '587'))
    SMTP_USER = os.environ.get('SMTP_USER', '')
    SMTP_PASS = os.environ.get('SMTP_PASS', '')
    MAIL_MOCK = _env_flag('MAIL_MOCK', True)

    @staticmethod
    def init_app(app):
        pass


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f'sqlite:///{DATA_DIR / "projects.db"}'

    @staticmethod
    def init_app(app):
        DATA_DIR.mkdir(parents=True, exist_ok=True)


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    MAIL_MOCK = _env_flag('MAIL_MOCK', False)
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f'sqlite:///{DATA_DIR / "projects.db"}'

    @staticmethod
    def init_app(app):
        DATA_DIR.mkdir(parents=True, exist_ok=True)


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SEED_ON_INIT = False
    MAIL_MOCK = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'

# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
