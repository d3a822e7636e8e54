"""S3転送設定管理"""
from boto3.s3.transfer import TransferConfig as BotoTransferConfig
from ..models.config import SyncOptions


class TransferConfigManager:
    """S3転送設定の管理"""

    @staticmethod
    def create_config(options: SyncOptions) -> BotoTransferConfig:
        """SyncOptionsからTransferConfigを作成"""
        return BotoTransferConfig(
            multipart_threshold=options.multipart_threshold,
            multipart_chunksize=options.multipart_chunksize,
            max_concurrency=options.max_concurrency,
            use_threads=options.use_threads,
        )
