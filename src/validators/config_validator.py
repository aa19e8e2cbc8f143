"""
Configuration Validator
Validates required environment variables at application startup.
Fails fast if any configuration is missing or invalid.

NOTE: This module uses print() for validation messages because it runs BEFORE
logger initialization. The logger depends on validated config values.
"""

import os
import sys
from datetime import datetime
from urllib.parse import urlparse


def _log(message: str, level: str = "INFO", stream=sys.stdout):
    timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    print(f"[{timestamp}] {level} - {message}", file=stream)


def is_valid_url(url: str) -> bool:
    """Validates a URL format"""
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc])
    except ValueError:
        return False


def is_valid_port(port: str) -> bool:
    """Validates a port number"""
    try:
        port_num = int(port)
        return 0 < port_num <= 65535
    except (ValueError, TypeError):
        return False


def is_valid_log_level(level: str) -> bool:
    return level.upper() in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def is_valid_environment(env: str) -> bool:
    return env.lower() in ['development', 'production', 'test', 'staging']


def is_valid_boolean(value: str) -> bool:
    return value.lower() in ['true', 'false']


def _non_empty(value: str) -> bool:
    return bool(value and value.strip())


# Configuration validation rules
VALIDATION_RULES = {
    # Service Configuration
    'ENVIRONMENT': {
        'required': True,
        'validator': is_valid_environment,
        'error_message': 'ENVIRONMENT must be one of: development, production, test, staging',
    },
    'PORT': {
        'required': True,
        'validator': is_valid_port,
        'error_message': 'PORT must be a valid port number (1-65535)',
    },
    'SERVICE_NAME': {
        'required': True,
        'validator': _non_empty,
        'error_message': 'SERVICE_NAME must be a non-empty string',
    },

    # Database Configuration
    'MONGO_INITDB_DATABASE': {
        'required': True,
        'validator': _non_empty,
        'error_message': 'MONGO_INITDB_DATABASE must be a non-empty string',
    },
    'MONGODB_HOST': {
        'required': False,
        'validator': _non_empty,
        'error_message': 'MONGODB_HOST must be a non-empty string if provided',
        'default': 'localhost',
    },
    'MONGODB_PORT': {
        'required': False,
        'validator': is_valid_port,
        'error_message': 'MONGODB_PORT must be a valid port number if provided',
        'default': '27017',
    },
    'MONGODB_AUTH_SOURCE': {
        'required': False,
        'validator': _non_empty,
        'error_message': 'MONGODB_AUTH_SOURCE must be a non-empty string if provided',
        'default': 'admin',
    },

    # CORS Configuration
    'CORS_ORIGINS': {
        'required': False,
        'validator': lambda v: all(
            origin.strip() == '*' or is_valid_url(origin.strip())
            for origin in v.split(',')
        ),
        'error_message': 'CORS_ORIGINS must be a comma-separated list of valid URLs or *',
        'default': 'http://localhost:3000',
    },

    # Logging Configuration
    'LOG_LEVEL': {
        'required': False,
        'validator': is_valid_log_level,
        'error_message': 'LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL',
        'default': 'INFO',
    },
    'LOG_FORMAT': {
        'required': False,
        'validator': lambda v: v.lower() in ['json', 'console'],
        'error_message': 'LOG_FORMAT must be either json or console',
        'default': 'json',
    },
    'LOG_TO_CONSOLE': {
        'required': False,
        'validator': is_valid_boolean,
        'error_message': 'LOG_TO_CONSOLE must be true or false',
        'default': 'true',
    },
    'LOG_TO_FILE': {
        'required': False,
        'validator': is_valid_boolean,
        'error_message': 'LOG_TO_FILE must be true or false',
        'default': 'false',
    },
    'CORRELATION_ID_HEADER': {
        'required': False,
        'validator': lambda v: len(v) > 0 and all(c.islower() or c == '-' for c in v),
        'error_message': 'CORRELATION_ID_HEADER must be lowercase with hyphens only',
        'default': 'x-correlation-id',
    },
}


def collect_config_errors(environ=None) -> tuple:
    """
    Check the environment against VALIDATION_RULES.

    Missing optional variables are filled with their defaults in ``environ``.

    Returns:
        tuple: (errors, warnings) as lists of strings
    """
    environ = os.environ if environ is None else environ
    errors = []
    warnings = []

    for key, rule in VALIDATION_RULES.items():
        value = environ.get(key)

        if not value:
            if rule['required']:
                errors.append(f"{key} is required but not set")
            elif 'default' in rule:
                warnings.append(f"{key} not set, using default: {rule['default']}")
                environ[key] = rule['default']
            continue

        if not rule['validator'](value):
            shown = f"{value[:100]}..." if len(value) > 100 else value
            errors.append(f"{key}: {rule['error_message']} (current value: {shown})")

    return errors, warnings


def validate_config():
    """
    Validates all environment variables according to the rules.
    Raises SystemExit if any required variable is missing or invalid.
    """
    _log('[CONFIG] Validating environment configuration...')

    errors, warnings = collect_config_errors()

    for warning in warnings:
        _log(warning, level="WARNING")

    if errors:
        _log('[CONFIG] Configuration validation failed:', level="ERROR", stream=sys.stderr)
        for error in errors:
            _log(error, level="ERROR", stream=sys.stderr)
        _log('Please check your .env file and ensure all required variables are set correctly.',
             level="ERROR", stream=sys.stderr)
        sys.exit(1)

    _log('[CONFIG] All required environment variables are valid')
