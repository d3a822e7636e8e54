"""公開設定・計画作成・アップロードの順に同期を実行"""
from enum import Enum
from typing import Optional

from ..models.config import SyncOptions
from ..models.task import ExecutionPlan
from ..utils.logger import LoggerManager
from .executor import BoundedTaskExecutor
from .plan import ExecutionPlanBuilder
from .publisher import BucketPublisher
from .uploader import UploadExecutor


class SyncState(Enum):
    """同期処理の状態"""
    START = "start"
    POLICY_PENDING = "policy_pending"
    PLAN_PENDING = "plan_pending"
    UPLOAD_PENDING = "upload_pending"
    DONE = "done"
    FAILED = "failed"


class SiteSynchronizer:
    """ローカルディレクトリをS3バケットへ同期する

    各フェーズは直列に実行し、最初のエラーで残りを打ち切る。
    失敗時に設定済みのポリシーやアップロード済みのオブジェクトは戻さない。
    """

    def __init__(self, s3_client, options: Optional[SyncOptions] = None):
        self.s3_client = s3_client
        self.options = options or SyncOptions()
        self.logger = LoggerManager.get_logger()
        self.state = SyncState.START
        self.error: Optional[Exception] = None

        self.publisher = BucketPublisher(s3_client, dry_run=self.options.dry_run)
        self.plan_builder = ExecutionPlanBuilder(
            self.options.max_parallel, self.options.exclude_patterns
        )
        self.executor = BoundedTaskExecutor(self.options.max_parallel)

    def _transition(self, state: SyncState):
        self.logger.debug(f"Sync state: {self.state.value} -> {state.value}")
        self.state = state

    def _fail(self, error: Exception):
        self.error = error
        self._transition(SyncState.FAILED)
        self.logger.error(f"Synchronization failed: {error}")

    def synchronize(self, root_path: str, search_pattern: Optional[str], bucket_name: str) -> None:
        """バケットを公開設定にしてからディレクトリをアップロード"""
        self.state = SyncState.START
        self.error = None
        try:
            self._transition(SyncState.POLICY_PENDING)
            self.publisher.publish(bucket_name)

            self._transition(SyncState.PLAN_PENDING)
            plan = self.plan_builder.build(root_path, search_pattern)

            self._transition(SyncState.UPLOAD_PENDING)
            self._upload(plan, bucket_name)
        except Exception as e:
            self._fail(e)
            raise

        self._transition(SyncState.DONE)
        self.logger.info("SUCCESS: Finished uploading files...")

    def build_plan(self, root_path: str, search_pattern: Optional[str] = None) -> ExecutionPlan:
        """実行計画のみを作成"""
        return self.plan_builder.build(root_path, search_pattern)

    def publish_policy(self, bucket_name: str) -> None:
        """バケットポリシーのみを設定"""
        self.publisher.publish(bucket_name)

    def upload_plan(self, root_path: str, search_pattern: Optional[str], bucket_name: str) -> None:
        """ポリシーを変更せずに計画作成とアップロードを実行"""
        self.state = SyncState.START
        self.error = None
        try:
            self._transition(SyncState.PLAN_PENDING)
            plan = self.plan_builder.build(root_path, search_pattern)

            self._transition(SyncState.UPLOAD_PENDING)
            self._upload(plan, bucket_name)
        except Exception as e:
            self._fail(e)
            raise

        self._transition(SyncState.DONE)

    def _upload(self, plan: ExecutionPlan, bucket_name: str) -> None:
        self.logger.info(f"Uploading {len(plan)} files to bucket '{bucket_name}'")
        # TODO: 既存オブジェクトとの差分を取り、不要になったキーを削除する
        writer = UploadExecutor(self.s3_client, bucket_name, self.options)
        self.executor.execute(plan, writer)
