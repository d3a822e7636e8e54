"""ファイル操作関連のユーティリティ"""
import fnmatch
import glob
import mimetypes
import os
import stat
from typing import BinaryIO, List

from ..errors import DiscoveryError, StatError
from ..models.config import DEFAULT_CONTENT_TYPE


def list_matches(root_path: str, search_pattern: str) -> List[str]:
    """ルート配下でパターンに一致する絶対パスを探索順で返す"""
    if not os.path.isdir(root_path):
        raise DiscoveryError(f"Not a directory: {root_path}", {"path": root_path})

    glob_path = os.path.join(glob.escape(root_path), search_pattern)
    try:
        return glob.glob(glob_path, recursive=True)
    except OSError as e:
        raise DiscoveryError(f"Error discovering files in {root_path}: {e}", {"path": root_path}) from e


def is_regular_file(path: str) -> bool:
    """通常ファイルか判定（シンボリックリンクは辿る）"""
    try:
        st = os.stat(path)
    except OSError as e:
        raise StatError(path, e.strerror or str(e)) from e
    return stat.S_ISREG(st.st_mode)


def open_read_stream(path: str) -> BinaryIO:
    """アップロード用にバイナリストリームを開く"""
    return open(path, "rb")


def lookup_content_type(path: str, default: str = DEFAULT_CONTENT_TYPE) -> str:
    """拡張子からContent-Typeを求める（不明な場合はdefault）"""
    content_type, _ = mimetypes.guess_type(path)
    return content_type or default


def to_remote_key(root_path: str, local_path: str) -> str:
    """ルートからの相対パスを "/" 区切りのキーに変換"""
    relative_path = os.path.relpath(local_path, root_path)
    if relative_path == os.curdir:
        return ""
    return relative_path.replace(os.sep, "/")


class PathFilter:
    """除外パターンによるフィルタ"""

    def __init__(self, exclude_patterns: List[str] = None):
        self.exclude_patterns = exclude_patterns or []

    def should_exclude(self, root_path: str, file_path: str) -> bool:
        """相対パスまたはその構成要素（ディレクトリ名・ファイル名）が除外パターンに一致するか"""
        relative_path = to_remote_key(root_path, file_path)
        if not relative_path:
            return False
        parts = relative_path.split("/")

        for pattern in self.exclude_patterns:
            if fnmatch.fnmatch(relative_path, pattern):
                return True
            # 除外ディレクトリ配下のファイルも除外
            if any(fnmatch.fnmatch(part, pattern) for part in parts):
                return True

        return False

    def apply(self, root_path: str, paths: List[str]) -> List[str]:
        """除外対象を取り除いたリストを返す"""
        if not self.exclude_patterns:
            return paths
        return [p for p in paths if not self.should_exclude(root_path, p)]
