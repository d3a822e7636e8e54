"""S3クライアント管理"""
import boto3
from typing import Optional, Dict
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError
from ..errors import ConfigurationError
from ..models.config import AWSConfig
from ..utils.logger import LoggerManager


class S3ClientManager:
    """S3クライアントの作成と管理

    作成したクライアントは全スレッドで共有する。
    """

    def __init__(self, aws_config: AWSConfig):
        self.aws_config = aws_config
        self.logger = LoggerManager.get_logger()
        self._client = None

    def get_client(self):
        """S3クライアントを取得（必要に応じて作成）"""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _session(self) -> boto3.Session:
        if self.aws_config.profile:
            return boto3.Session(profile_name=self.aws_config.profile)
        return boto3.Session()

    def _create_client(self):
        """S3クライアントを作成"""
        session = self._session()
        region = self.aws_config.region

        try:
            if self.aws_config.assume_role:
                credentials = self._assume_role(session)
                client = session.client(
                    's3',
                    region_name=region,
                    aws_access_key_id=credentials['access_key_id'],
                    aws_secret_access_key=credentials['secret_access_key'],
                    aws_session_token=credentials['session_token'],
                )
                self.logger.info("S3 client created with assumed role credentials.")
                return client

            client = session.client('s3', region_name=region)
            self.logger.info("S3 client created with default credentials.")
            return client

        except NoCredentialsError:
            self.logger.error("AWS credentials not available.")
            raise

    def _assume_role(self, session: boto3.Session) -> Dict[str, str]:
        """AssumeRoleを実行して一時的な認証情報を取得"""
        assume_role_config = self.aws_config.assume_role
        sts_client = session.client(
            'sts',
            region_name=self.aws_config.region,
            endpoint_url=f"https://sts.{self.aws_config.region}.amazonaws.com",
        )

        params = {
            'RoleArn': assume_role_config.role_arn,
            'RoleSessionName': assume_role_config.session_name,
            'DurationSeconds': assume_role_config.duration_seconds,
        }
        if assume_role_config.external_id:
            params['ExternalId'] = assume_role_config.external_id

        try:
            credentials = sts_client.assume_role(**params)['Credentials']
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"Error assuming role: {e}")
            raise ConfigurationError(
                f"Could not assume role {assume_role_config.role_arn}: {e}",
                {"role_arn": assume_role_config.role_arn},
            ) from e

        self.logger.info(f"Assumed role successfully: {assume_role_config.role_arn}")
        return {
            'access_key_id': credentials['AccessKeyId'],
            'secret_access_key': credentials['SecretAccessKey'],
            'session_token': credentials['SessionToken'],
        }
