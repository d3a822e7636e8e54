"""ローカルディレクトリから実行計画を作成"""
import os
from typing import List, Optional

from ..errors import StatError, TranslationAbort
from ..models.config import DEFAULT_MAX_PARALLEL, DEFAULT_SEARCH_PATTERN
from ..models.task import ExecutionPlan, UploadTask
from ..utils.file_utils import PathFilter, is_regular_file, list_matches, to_remote_key
from ..utils.logger import LoggerManager
from .executor import BoundedTaskExecutor


class PathTranslator:
    """絶対パスをアップロードタスクに変換"""

    def __init__(self, root_path: str):
        self.root_path = root_path

    def __call__(self, entry_path: str) -> Optional[UploadTask]:
        return self.translate(entry_path)

    def translate(self, entry_path: str) -> Optional[UploadTask]:
        """通常ファイルならタスクを、それ以外ならNoneを返す"""
        # S3にはディレクトリの概念がない
        if not is_regular_file(entry_path):
            return None
        return UploadTask(
            local_path=entry_path,
            remote_path=to_remote_key(self.root_path, entry_path),
        )


class ExecutionPlanBuilder:
    """探索結果からアップロードタスクの一覧を作る"""

    def __init__(self, max_parallel: int = DEFAULT_MAX_PARALLEL,
                 exclude_patterns: List[str] = None):
        self.executor = BoundedTaskExecutor(max_parallel)
        self.path_filter = PathFilter(exclude_patterns)
        self.logger = LoggerManager.get_logger()

    def build(self, root_path: str, search_pattern: Optional[str] = None) -> ExecutionPlan:
        """root_path配下をsearch_patternで探索して実行計画を返す

        1件でもstatに失敗した場合は計画全体を破棄してTranslationAbortを送出する。
        """
        root_path = os.path.abspath(root_path)
        search_pattern = search_pattern or DEFAULT_SEARCH_PATTERN

        self.logger.info(f"Discovering files in {root_path} ({search_pattern})...")
        paths = self.path_filter.apply(root_path, list_matches(root_path, search_pattern))

        translator = PathTranslator(root_path)
        try:
            translated = self.executor.map(translator, paths)
        except StatError as e:
            self.logger.error(f"Aborting plan for {root_path}: {e}")
            raise TranslationAbort(
                f"Plan building aborted for {root_path}: {e.message}",
                {"root_path": root_path, "path": e.path},
            ) from e

        plan = [task for task in translated if task is not None]
        self.logger.info(f"Discovered {len(plan)} files in {root_path}")
        return plan
