"""
Validators package
"""

from .config_validator import collect_config_errors, validate_config

__all__ = [
    "collect_config_errors",
    "validate_config",
]
