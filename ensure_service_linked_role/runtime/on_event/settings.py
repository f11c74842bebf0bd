"""
settings
-------
"""
import os
import logging
from types import MappingProxyType


LOG_LEVEL = os.environ.get("LOG_LEVEL", "info")
# aws service name to the role name iam gives its service-linked role
SERVICE_ROLE_NAMES = MappingProxyType(
    {
        "inspector.amazonaws.com": "AWSServiceRoleForAmazonInspector",
    }
)
LOGGING_LEVELS = {
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "fatal": logging.FATAL,
}
