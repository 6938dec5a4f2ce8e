"""
Utility modules for devtoken.
"""

from .patcher import (
    BEARER_PATTERN,
    ENVIRONMENT_PATTERN,
    replace_bearer_token,
    replace_environment,
    update_api_client,
    update_utils,
    update_files
)

__all__ = [
    'BEARER_PATTERN',
    'ENVIRONMENT_PATTERN',
    'replace_bearer_token',
    'replace_environment',
    'update_api_client',
    'update_utils',
    'update_files'
]
