"""設定された全サイトの同期を実行"""
from typing import Tuple

from ..errors import SiteSyncError
from ..models.config import Config, SiteConfig
from ..utils.logger import LoggerManager
from .s3_client import S3ClientManager
from .sync import SiteSynchronizer


class SiteRunner:
    """サイトごとに同期を実行（1サイトの失敗は他に影響しない）"""

    def __init__(self, config: Config, s3_client=None):
        self.config = config
        self.logger = LoggerManager.get_logger()

        if s3_client is None:
            s3_client = S3ClientManager(config.aws).get_client()
        self.s3_client = s3_client
        self.synchronizer = SiteSynchronizer(self.s3_client, config.options)

    def run_all(self) -> Tuple[int, int]:
        """全てのサイトを同期し、(成功数, 失敗数) を返す"""
        total = len(self.config.sites)
        successful = 0
        failed = 0

        self.logger.info(f"Starting site sync: {total} sites to process")

        for i, site in enumerate(self.config.sites, 1):
            if not site.enabled:
                self.logger.info(f"Skipping disabled site: {site.name}")
                continue

            self.logger.info(f"Site {i}/{total}: Starting '{site.name}' ({site.source} -> {site.bucket})")
            try:
                self.run_site(site)
            except SiteSyncError as e:
                failed += 1
                self.logger.error(f"Site {i}/{total}: '{site.name}' failed: {e}")
                continue

            successful += 1
            self.logger.info(f"Site {i}/{total}: '{site.name}' completed successfully")

        self.logger.info(f"Site sync completed: {successful} successful, {failed} failed")
        return successful, failed

    def run_site(self, site: SiteConfig) -> None:
        """単一サイトを同期"""
        search_pattern = site.search_pattern or self.config.options.search_pattern
        if site.publish:
            self.synchronizer.synchronize(site.source, search_pattern, site.bucket)
        else:
            self.synchronizer.upload_plan(site.source, search_pattern, site.bucket)
