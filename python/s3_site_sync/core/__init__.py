"""S3 Site Sync コアモジュール"""
from .s3_client import S3ClientManager
from .executor import BoundedTaskExecutor
from .plan import PathTranslator, ExecutionPlanBuilder
from .publisher import BucketPublisher, build_policy_document
from .uploader import UploadExecutor
from .sync import SiteSynchronizer, SyncState
from .task_runner import SiteRunner

__all__ = [
    'S3ClientManager',
    'BoundedTaskExecutor',
    'PathTranslator',
    'ExecutionPlanBuilder',
    'BucketPublisher',
    'build_policy_document',
    'UploadExecutor',
    'SiteSynchronizer',
    'SyncState',
    'SiteRunner',
]
