"""S3へのファイル書き込み"""
from botocore.exceptions import BotoCoreError, ClientError

from ..errors import RemoteWriteError
from ..models.config import SyncOptions
from ..models.task import UploadTask
from ..utils.file_utils import lookup_content_type, open_read_stream
from ..utils.logger import LoggerManager
from .transfer import TransferConfigManager


class UploadExecutor:
    """1タスク分のアップロードを実行"""

    def __init__(self, s3_client, bucket: str, options: SyncOptions):
        self.s3_client = s3_client
        self.bucket = bucket
        self.options = options
        self.logger = LoggerManager.get_logger()
        self.transfer_config = TransferConfigManager.create_config(options)

    def __call__(self, task: UploadTask) -> None:
        self.upload_task(task)

    def upload_task(self, task: UploadTask) -> None:
        """ファイルを公開読み取り可能なオブジェクトとしてアップロード"""
        content_type = lookup_content_type(task.local_path, self.options.default_content_type)

        if self.options.dry_run:
            self.logger.info(
                f"[DRY RUN]: Would upload {task.local_path} ({content_type}) "
                f"to {self.bucket}/{task.remote_path}"
            )
            return

        try:
            with open_read_stream(task.local_path) as body:
                self.s3_client.upload_fileobj(
                    body,
                    self.bucket,
                    task.remote_path,
                    ExtraArgs={
                        "ACL": self.options.acl,
                        "ContentType": content_type,
                    },
                    Config=self.transfer_config,
                )
        except (OSError, ClientError, BotoCoreError) as e:
            raise RemoteWriteError(task.local_path, task.remote_path, str(e)) from e

        self.logger.debug(
            f"Uploaded '{task.local_path}' of '{content_type}' "
            f"to '{self.bucket}' at '{task.remote_path}'"
        )
