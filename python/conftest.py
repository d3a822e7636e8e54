"""テスト共通のフィクスチャ"""
import threading
import time

import pytest
from botocore.exceptions import ClientError

from s3_site_sync.models.config import LoggingConfig
from s3_site_sync.utils.logger import LoggerManager


@pytest.fixture(autouse=True)
def logger():
    return LoggerManager.setup(LoggingConfig(level="DEBUG"))


class FakeS3Client:
    """upload_fileobj / put_bucket_policy を記録するだけのクライアント"""

    def __init__(self, delay: float = 0.0):
        self.delay = delay
        self.lock = threading.Lock()
        self.calls = []
        self.uploads = {}
        self.policies = []
        self.fail_keys = set()
        self.fail_policy = False

    def upload_fileobj(self, body, bucket, key, ExtraArgs=None, Config=None):
        data = body.read()
        if self.delay:
            time.sleep(self.delay)
        if key in self.fail_keys:
            raise ClientError(
                {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}}, "PutObject"
            )
        with self.lock:
            self.calls.append(("upload_fileobj", key))
            self.uploads[key] = {"bucket": bucket, "body": data, "extra_args": ExtraArgs}

    def put_bucket_policy(self, Bucket, Policy):
        if self.fail_policy:
            raise ClientError(
                {"Error": {"Code": "AccessDenied", "Message": "Access Denied"}}, "PutBucketPolicy"
            )
        with self.lock:
            self.calls.append(("put_bucket_policy", Bucket))
            self.policies.append((Bucket, Policy))


@pytest.fixture
def fake_s3():
    return FakeS3Client()


@pytest.fixture
def site_tree(tmp_path):
    """index.html, css/style.css, 空の img/ を持つディレクトリ"""
    root = tmp_path / "site"
    (root / "css").mkdir(parents=True)
    (root / "img").mkdir()
    (root / "index.html").write_text("<html></html>")
    (root / "css" / "style.css").write_text("body {}")
    return root
