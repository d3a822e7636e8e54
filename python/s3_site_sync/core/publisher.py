"""バケットを公開読み取り可能にする"""
import json
from typing import Any, Dict

from botocore.exceptions import BotoCoreError, ClientError

from ..errors import PolicyError
from ..utils.logger import LoggerManager


POLICY_VERSION = "2012-10-17"


def build_policy_document(bucket_name: str) -> Dict[str, Any]:
    """匿名ユーザーにGetObjectを許可するポリシー"""
    return {
        "Version": POLICY_VERSION,
        "Statement": [
            {
                "Sid": "AddPerm",
                "Effect": "Allow",
                "Principal": "*",
                "Action": ["s3:GetObject"],
                "Resource": [
                    f"arn:aws:s3:::{bucket_name}/*",
                    f"arn:aws:s3:::{bucket_name}/**/*",
                ],
            }
        ],
    }


class BucketPublisher:
    """バケットポリシーを設定"""

    def __init__(self, s3_client, dry_run: bool = False):
        self.s3_client = s3_client
        self.dry_run = dry_run
        self.logger = LoggerManager.get_logger()

    def publish(self, bucket_name: str) -> None:
        """put_bucket_policyを1回だけ呼ぶ（反映の確認はしない）"""
        policy = json.dumps(build_policy_document(bucket_name))

        if self.dry_run:
            self.logger.info(f"[DRY RUN]: Would make bucket '{bucket_name}' readable")
            return

        try:
            self.s3_client.put_bucket_policy(Bucket=bucket_name, Policy=policy)
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"Error setting policy on bucket '{bucket_name}': {e}")
            raise PolicyError(
                f"Failed to set policy on bucket {bucket_name}: {e}",
                {"bucket": bucket_name},
            ) from e

        self.logger.info(f"Made bucket '{bucket_name}' readable")
        # TODO: put_bucket_website で index/error ドキュメントを設定する
