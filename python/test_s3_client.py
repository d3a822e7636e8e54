#!/usr/bin/env python3
"""S3クライアントのテスト"""
from unittest import mock

import pytest
from botocore.exceptions import ClientError

from s3_site_sync.core.s3_client import S3ClientManager
from s3_site_sync.errors import ConfigurationError
from s3_site_sync.models.config import AWSConfig


ROLE = {
    "role_arn": "arn:aws:iam::123456789012:role/deployer",
    "session_name": "site-sync",
    "external_id": "ext-1",
}


@pytest.fixture
def session_cls():
    with mock.patch("s3_site_sync.core.s3_client.boto3.Session") as session_cls:
        yield session_cls


def test_default_client_is_cached(session_cls):
    manager = S3ClientManager(AWSConfig(region="us-east-1"))

    client = manager.get_client()

    assert manager.get_client() is client
    session_cls.assert_called_once_with()
    session_cls.return_value.client.assert_called_once_with('s3', region_name="us-east-1")


def test_profile_session(session_cls):
    S3ClientManager(AWSConfig(region="us-east-1", profile="deploy")).get_client()
    session_cls.assert_called_once_with(profile_name="deploy")


def test_assume_role(session_cls):
    sts = mock.Mock()
    sts.assume_role.return_value = {"Credentials": {
        "AccessKeyId": "AKIA", "SecretAccessKey": "secret", "SessionToken": "token",
    }}
    s3 = mock.Mock()
    session = session_cls.return_value
    session.client.side_effect = lambda service, **kwargs: sts if service == 'sts' else s3

    client = S3ClientManager(AWSConfig(region="eu-west-1", assume_role=ROLE)).get_client()

    assert client is s3
    sts.assume_role.assert_called_once_with(
        RoleArn=ROLE["role_arn"],
        RoleSessionName="site-sync",
        DurationSeconds=3600,
        ExternalId="ext-1",
    )
    session.client.assert_called_with(
        's3',
        region_name="eu-west-1",
        aws_access_key_id="AKIA",
        aws_secret_access_key="secret",
        aws_session_token="token",
    )


def test_assume_role_failure(session_cls):
    sts = mock.Mock()
    sts.assume_role.side_effect = ClientError(
        {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "AssumeRole"
    )
    session_cls.return_value.client.return_value = sts

    with pytest.raises(ConfigurationError):
        S3ClientManager(AWSConfig(region="eu-west-1", assume_role=ROLE)).get_client()
