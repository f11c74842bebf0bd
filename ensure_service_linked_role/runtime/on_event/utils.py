"""
utils
-------
"""
import json
import logging
from typing import Optional

import boto3
from botocore.exceptions import ClientError

from .settings import LOG_LEVEL, LOGGING_LEVELS, SERVICE_ROLE_NAMES

if len(logging.getLogger().handlers) > 0:
    # The Lambda environment pre-configures a handler logging to stderr.
    # If a handler is already configured,
    # `.basicConfig` does not execute. Thus we set the level directly.
    logging.getLogger().setLevel(LOGGING_LEVELS.get(LOG_LEVEL.lower(), logging.INFO))
else:
    logging.basicConfig(level=LOGGING_LEVELS.get(LOG_LEVEL.lower(), logging.INFO))
logger = logging.getLogger(__name__)


iam_client = boto3.client("iam")


class ServiceLinkedRoleError(Exception):
    pass


class UnsupportedServiceError(ServiceLinkedRoleError):
    def __init__(self, service_name: str):
        super().__init__(f"No service-linked role name known for {service_name}")
        self.service_name = service_name


class RoleCreationError(ServiceLinkedRoleError):
    def __init__(self, service_name: str, error: dict):
        super().__init__(
            f"Unable to create the service-linked role for {service_name}: "
            f"{error.get('Code')} {error.get('Message')}"
        )
        self.service_name = service_name
        self.error = error


def role_name_for(service_name: str) -> str:
    """ the role name iam assigns to the service-linked role of a service """
    try:
        return SERVICE_ROLE_NAMES[service_name]
    except KeyError:
        raise UnsupportedServiceError(service_name) from None


def role_identity(role: dict) -> dict:
    return {"Arn": role["Arn"], "RoleId": role["RoleId"]}


def get_existing_role(role_name: str) -> Optional[dict]:
    """
    Fetch a role by name, returning ``None`` when it cannot be fetched.

    Every lookup failure counts as "role does not exist", so a throttled or
    denied ``GetRole`` leads to a creation attempt. Anything other than
    ``NoSuchEntity`` is logged as a warning to keep that case visible.
    """
    try:
        return iam_client.get_role(RoleName=role_name)["Role"]
    except ClientError as err:
        if err.response["Error"]["Code"] == "NoSuchEntity":
            logger.info(f"Role {role_name} does not exist")
        else:
            logger.warning(f"Lookup of role {role_name} failed, treating as absent: {err}")
    except Exception as err:
        logger.warning(f"Lookup of role {role_name} failed, treating as absent: {err}")
    return None


def create_service_linked_role(service_name: str) -> dict:
    """ create the service-linked role for a service, one attempt only """
    try:
        return iam_client.create_service_linked_role(AWSServiceName=service_name)[
            "Role"
        ]
    except ClientError as err:
        logger.error(
            f"Unable to create the service-linked role for service {service_name}"
        )
        logger.error(f"exception = {json.dumps(err.response, default=str)}")
        raise RoleCreationError(service_name, err.response["Error"]) from err
