"""実行計画のデータクラス"""
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class UploadTask:
    """1ファイル分のアップロード単位"""
    local_path: str
    remote_path: str  # ルートからの相対パス（区切りは常に "/"）
    kind: str = "file"

    @property
    def is_root(self) -> bool:
        """ルートそのものを指すタスクか"""
        return self.remote_path == ""


# 探索順のタスク列（ディレクトリは含まない）
ExecutionPlan = List[UploadTask]
