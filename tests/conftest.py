import os
from unittest import mock

import pytest

# the runtime modules create their iam client at import time
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("LOG_LEVEL", "info")

from ensure_service_linked_role.runtime.on_event import utils  # noqa: E402


INSPECTOR = "inspector.amazonaws.com"
INSPECTOR_ROLE_NAME = "AWSServiceRoleForAmazonInspector"
INSPECTOR_ROLE_ARN = (
    "arn:aws:iam::123456789012:role/aws-service-role/"
    "inspector.amazonaws.com/AWSServiceRoleForAmazonInspector"
)


def make_event(request_type, service=INSPECTOR, physical_id=None):
    event = {
        "RequestType": request_type,
        "ServiceToken": "arn:aws:lambda:us-east-1:123456789012:function:provider",
        "ResourceType": "Custom::IdempotentCreateServiceLinkedRole",
        "LogicalResourceId": "role1resource",
        "StackId": "arn:aws:cloudformation:us-east-1:123456789012:stack/slr/guid",
        "RequestId": "unique-id-for-this-request",
        "ResourceProperties": {
            "ServiceToken": "arn:aws:lambda:us-east-1:123456789012:function:provider",
            "AWSServiceName": service,
        },
    }
    if physical_id is not None:
        event["PhysicalResourceId"] = physical_id
    return event


def make_role(arn=INSPECTOR_ROLE_ARN, role_id="AROAEXAMPLE"):
    return {
        "Path": "/aws-service-role/inspector.amazonaws.com/",
        "RoleName": INSPECTOR_ROLE_NAME,
        "RoleId": role_id,
        "Arn": arn,
    }


@pytest.fixture
def iam(monkeypatch):
    """ replace the handler's iam client """
    client = mock.MagicMock()
    monkeypatch.setattr(utils, "iam_client", client)
    return client
