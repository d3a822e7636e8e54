"""同時実行数を制限したタスク実行"""
import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, Iterable, List, TypeVar

from ..errors import BatchAbortError
from ..models.config import DEFAULT_MAX_PARALLEL
from ..models.task import UploadTask
from ..utils.logger import LoggerManager

T = TypeVar("T")
R = TypeVar("R")


class BoundedTaskExecutor:
    """最大 max_parallel 件までを並列に実行する

    最初に失敗したタスクで打ち切る（fail-fast）。失敗後に未着手のタスクは
    実行せず、実行中のタスクは完了を待つが結果は捨てる。
    リトライもロールバックも行わない。
    """

    def __init__(self, max_parallel: int = DEFAULT_MAX_PARALLEL):
        if max_parallel < 1:
            raise ValueError(f"max_parallel must be at least 1, got {max_parallel}")
        self.max_parallel = max_parallel
        self.logger = LoggerManager.get_logger()

    def map(self, fn: Callable[[T], R], items: Iterable[T]) -> List[R]:
        """fnを全要素に適用し、入力順の結果リストを返す

        最初に発生した例外をそのまま送出する。
        """
        items = list(items)
        results: List[R] = [None] * len(items)
        failed = threading.Event()

        pool = ThreadPoolExecutor(max_workers=self.max_parallel)
        try:
            future_to_index = {
                pool.submit(self._guarded, failed, fn, item): i for i, item in enumerate(items)
            }
            for future in as_completed(future_to_index):
                results[future_to_index[future]] = future.result()
        except BaseException:
            pool.shutdown(wait=True, cancel_futures=True)
            raise
        pool.shutdown(wait=True)
        return results

    def execute(self, tasks: Iterable[UploadTask], write_fn: Callable[[UploadTask], None]) -> None:
        """全タスクに write_fn を実行（完了順は不定）"""
        tasks = list(tasks)
        self.logger.info(
            f"Executing {len(tasks)} tasks with up to {self.max_parallel} in flight"
        )
        failed = threading.Event()

        pool = ThreadPoolExecutor(max_workers=self.max_parallel)
        try:
            future_to_task = {
                pool.submit(self._guarded, failed, self._run_task, write_fn, task): task
                for task in tasks
            }
            for future in as_completed(future_to_task):
                task = future_to_task[future]
                try:
                    future.result()
                except Exception as e:
                    self.logger.error(f"Task failed for {task.local_path}: {e}")
                    raise BatchAbortError(task, str(e)) from e
        except BaseException:
            pool.shutdown(wait=True, cancel_futures=True)
            raise
        pool.shutdown(wait=True)

    @staticmethod
    def _guarded(failed: threading.Event, fn: Callable, *args):
        # 失敗後にキューから取り出されたものは実行しない
        if failed.is_set():
            return None
        try:
            return fn(*args)
        except BaseException:
            failed.set()
            raise

    @staticmethod
    def _run_task(write_fn: Callable[[UploadTask], None], task: UploadTask) -> None:
        # ルート自身は書き込まない
        if task.is_root:
            return
        write_fn(task)
