"""バケットポリシー設定のテスト"""
import json

import boto3
import pytest
from botocore.stub import Stubber

from s3_site_sync.core.publisher import BucketPublisher, build_policy_document
from s3_site_sync.errors import PolicyError


@pytest.fixture
def s3_client():
    return boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


def test_policy_document():
    policy = build_policy_document("my-bucket")

    assert policy["Version"] == "2012-10-17"
    assert len(policy["Statement"]) == 1
    statement = policy["Statement"][0]
    assert statement["Sid"] == "AddPerm"
    assert statement["Effect"] == "Allow"
    assert statement["Principal"] == "*"
    assert statement["Action"] == ["s3:GetObject"]
    assert statement["Resource"] == [
        "arn:aws:s3:::my-bucket/*",
        "arn:aws:s3:::my-bucket/**/*",
    ]


def test_publish_puts_policy_once(s3_client):
    expected = {
        "Bucket": "my-bucket",
        "Policy": json.dumps(build_policy_document("my-bucket")),
    }
    with Stubber(s3_client) as stubber:
        stubber.add_response("put_bucket_policy", {}, expected)
        BucketPublisher(s3_client).publish("my-bucket")
        stubber.assert_no_pending_responses()


def test_publish_error_raises_policy_error(s3_client):
    with Stubber(s3_client) as stubber:
        stubber.add_client_error("put_bucket_policy", service_error_code="AccessDenied")
        with pytest.raises(PolicyError) as excinfo:
            BucketPublisher(s3_client).publish("my-bucket")

    assert excinfo.value.details == {"bucket": "my-bucket"}


def test_publish_dry_run(fake_s3):
    BucketPublisher(fake_s3, dry_run=True).publish("my-bucket")
    assert fake_s3.policies == []
