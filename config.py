import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

TARGET_ROLE = 'Edge Cloud Architect'

# Recognised handling of a choice answer whose text is not one of the options
UNMATCHED_OPTION_POLICIES = ('skip', 'first')

class Config:
    """Base configuration"""
    # Security - MUST be set in environment for production
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # Debug mode - default to False for safety
    DEBUG = os.environ.get('DEBUG', 'False').lower() == 'true'
    TESTING = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

    # Session configuration
    SESSION_PERMANENT = False

    # 'skip' ignores an unmatched choice answer, 'first' scores it as option 0
    UNMATCHED_OPTION_POLICY = os.environ.get('UNMATCHED_OPTION_POLICY', 'skip').lower()

    # Overall score blend (fixed, must sum to 1.0)
    OVERALL_WEIGHTS = {
        'psychometric': 0.25,
        'technical': 0.30,
        'aptitude': 0.20,
        'wiscar': 0.25,
    }

    # Recommendation tiers, lower bound inclusive
    YES_THRESHOLD = 75
    MAYBE_THRESHOLD = 55
    YES_CONFIDENCE_BONUS = 10

    MIN_CONFIDENCE = 30
    MAX_CONFIDENCE = 95

    # Configuration validation
    @classmethod
    def validate(cls):
        """Validate the configuration, raising ValueError listing every problem"""
        errors = []

        if cls.UNMATCHED_OPTION_POLICY not in UNMATCHED_OPTION_POLICIES:
            errors.append(
                f"UNMATCHED_OPTION_POLICY must be one of {UNMATCHED_OPTION_POLICIES}, "
                f"got '{cls.UNMATCHED_OPTION_POLICY}'"
            )

        if abs(sum(cls.OVERALL_WEIGHTS.values()) - 1.0) > 1e-9:
            errors.append("OVERALL_WEIGHTS must sum to 1.0")

        if not cls.MAYBE_THRESHOLD < cls.YES_THRESHOLD:
            errors.append("MAYBE_THRESHOLD must be below YES_THRESHOLD")

        # Warn about default values
        if cls.DEBUG:
            logger.warning("Debug mode is enabled. Disable in production!")

        if errors:
            error_msg = "\n".join(errors)
            raise ValueError(f"Configuration validation failed:\n{error_msg}")

        return True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = 1800

    @classmethod
    def validate(cls):
        if not cls.SECRET_KEY:
            raise ValueError("Configuration validation failed:\nSECRET_KEY is not set in environment variables")
        return super().validate()


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SECRET_KEY = Config.SECRET_KEY or 'dev-only-secret-key'


class TestingConfig(Config):
    """Configuration used by the test suite"""
    TESTING = True
    DEBUG = False
    SECRET_KEY = 'testing-secret-key'
    UNMATCHED_OPTION_POLICY = 'skip'


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment"""
    env = os.environ.get('FLASK_ENV', 'development')

    config_map = {
        'development': DevelopmentConfig,
        'production': ProductionConfig,
        'testing': TestingConfig,
        'default': DevelopmentConfig
    }

    config_class = config_map.get(env, config_map['default'])

    # Validate configuration
    try:
        config_class.validate()
        return config_class
    except ValueError as e:
        logger.error(f"Configuration Error: {e}")
        logger.error("Make sure you have a .env file with all required variables")
        raise
