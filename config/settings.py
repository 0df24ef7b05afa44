"""
Configuration settings for Cyber Law Readiness Assessment
"""

import os


class Config:
    """Base configuration"""
    # App
    APP_NAME = "Cyber Law Readiness Assessment"
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Rate limiting
    RATELIMIT_DEFAULT = "100 per minute"
    RATELIMIT_STORAGE_URI = os.environ.get('REDIS_URL', 'memory://')

    # Assessment sessions (held in memory only)
    MAX_ACTIVE_SESSIONS = int(os.environ.get('MAX_ACTIVE_SESSIONS', 1000))
    SESSION_TTL_MINUTES = int(os.environ.get('SESSION_TTL_MINUTES', 60))


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False

    # Ensure secret key is set in production
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY and os.environ.get('FLASK_ENV') == 'production':
        raise ValueError("SECRET_KEY must be set in production")


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    RATELIMIT_ENABLED = False
    MAX_ACTIVE_SESSIONS = 5


# Config mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config():
    """Get config based on environment"""
    env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
