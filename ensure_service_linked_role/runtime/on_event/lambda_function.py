"""
lambda_function
-------
"""
from .utils import (
    logger,
    role_name_for,
    role_identity,
    get_existing_role,
    create_service_linked_role,
)


# noinspection PyUnusedLocal
def lambda_handler(event: dict, context: object) -> dict:
    """
    On-event handler for the ``Custom::IdempotentCreateServiceLinkedRole``
    resource, called through the CDK custom resource provider framework.

    :param event: The custom resource request. ``RequestType`` is one of
        ``Create``, ``Update`` or ``Delete`` and
        ``ResourceProperties.AWSServiceName`` names the service, for example
        ``inspector.amazonaws.com``.
    :param context: The Lambda context object, unused.
    :return: The provider response, ``Data`` holding ``Arn`` and ``RoleId`` of
        the service-linked role after a create and nothing otherwise. A raised
        exception is reported to CloudFormation as ``FAILED``.
    """
    # show the event
    logger.info(f"event = {event}")

    request_type = event["RequestType"]
    if request_type == "Create":
        return on_create(event)
    if request_type == "Update":
        return on_update(event)
    if request_type == "Delete":
        return on_delete(event)
    raise Exception(f"Invalid request type: {request_type}")


def on_create(event):

    service_name = event["ResourceProperties"].get("AWSServiceName", "")
    role_name = role_name_for(service_name)

    role = get_existing_role(role_name)
    if role is not None:
        logger.info(
            f"The service-linked role for service {service_name} already exists. "
            "The Arn and RoleId will be returned."
        )
        return {"PhysicalResourceId": role_name, "Data": role_identity(role)}

    role = create_service_linked_role(service_name)
    logger.info(
        f"The service-linked role for service {service_name} has been created. "
        "The Arn and RoleId will be returned."
    )
    return {"PhysicalResourceId": role_name, "Data": role_identity(role)}


def on_update(event):
    # the role is never modified
    return {"PhysicalResourceId": event["PhysicalResourceId"], "Data": {}}


def on_delete(event):
    # the role is retained
    physical_id = event["PhysicalResourceId"]
    logger.info(f"Delete resource {physical_id}, the role is retained")
    return {"PhysicalResourceId": physical_id, "Data": {}}
