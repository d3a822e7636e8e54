"""同期処理の例外定義"""
from typing import Dict, Optional


class SiteSyncError(Exception):
    """全ての同期エラーの基底クラス"""

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(SiteSyncError):
    """設定が不正な場合"""


class DiscoveryError(SiteSyncError):
    """ファイル探索（glob）に失敗した場合"""


class StatError(SiteSyncError):
    """エントリのメタデータ取得に失敗した場合"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot stat {path}: {reason}", {"path": path})
        self.path = path


class TranslationAbort(SiteSyncError):
    """StatErrorにより実行計画の作成を中断した場合"""


class RemoteWriteError(SiteSyncError):
    """単一ファイルのアップロードに失敗した場合"""

    def __init__(self, local_path: str, remote_path: str, reason: str):
        super().__init__(
            f"Failed to upload {local_path} to {remote_path}: {reason}",
            {"local_path": local_path, "remote_path": remote_path},
        )
        self.local_path = local_path
        self.remote_path = remote_path


class PolicyError(SiteSyncError):
    """バケットポリシーの設定に失敗した場合"""


class BatchAbortError(SiteSyncError):
    """並列実行中に最初の失敗が発生した場合"""

    def __init__(self, task, reason: str):
        super().__init__(
            f"Batch aborted at {getattr(task, 'local_path', task)}: {reason}",
            {"task": repr(task)},
        )
        self.task = task
