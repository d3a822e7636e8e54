"""S3 Site Sync パッケージ"""
from typing import Tuple
from .models.config import Config
from .models.task import UploadTask
from .utils.logger import LoggerManager
from .core.sync import SiteSynchronizer, SyncState
from .core.task_runner import SiteRunner


class SiteSync:
    """静的サイト同期のメインクラス"""

    def __init__(self, config_path: str = "config.json", s3_client=None):
        self.config = Config.from_file(config_path)

        self.logger = LoggerManager.setup(self.config.logging)
        self.logger.info("S3 Site Sync initialized")

        self.runner = SiteRunner(self.config, s3_client)

    def run(self) -> Tuple[int, int]:
        """設定された全サイトを同期"""
        self.logger.info("Starting site synchronization...")
        return self.runner.run_all()


__all__ = ['SiteSync', 'SiteSynchronizer', 'SyncState', 'SiteRunner', 'Config', 'UploadTask']
