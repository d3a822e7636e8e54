"""設定管理用のデータクラス"""
from dataclasses import dataclass, field
from typing import List, Optional
import json
import os
import re

from ..errors import ConfigurationError


DEFAULT_MAX_PARALLEL = 25
DEFAULT_SEARCH_PATTERN = "**"
DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass
class LoggingConfig:
    """ロギング設定"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class AssumeRoleConfig:
    """AssumeRole設定"""
    role_arn: str
    session_name: str
    external_id: Optional[str] = None
    duration_seconds: int = 3600

    def __post_init__(self):
        arn_pattern = r'^arn:aws:iam::[0-9]{12}:role\/[a-zA-Z0-9+=,.@_-]+$'
        if not re.match(arn_pattern, self.role_arn):
            raise ConfigurationError(
                f"Invalid role_arn format: {self.role_arn}. "
                "Expected format: arn:aws:iam::ACCOUNT_ID:role/ROLE_NAME"
            )

        # 2-64文字の英数字と _ . - のみ
        if not self.session_name or not re.match(r'^[a-zA-Z0-9_.-]{2,64}$', self.session_name):
            raise ConfigurationError(
                f"Invalid session_name: {self.session_name!r}. "
                "Must be 2-64 characters of alphanumerics, underscores, hyphens and periods"
            )

        if not (900 <= self.duration_seconds <= 43200):
            raise ConfigurationError(
                f"Invalid duration_seconds: {self.duration_seconds}. "
                "Must be between 900 and 43200 seconds"
            )


@dataclass
class AWSConfig:
    """AWS関連の設定"""
    region: str
    profile: Optional[str] = None
    assume_role: Optional[AssumeRoleConfig] = None

    def __post_init__(self):
        if isinstance(self.assume_role, dict):
            self.assume_role = AssumeRoleConfig(**self.assume_role)
        elif self.assume_role is not None and not isinstance(self.assume_role, AssumeRoleConfig):
            raise ConfigurationError(
                f"assume_role must be dict or AssumeRoleConfig, got {type(self.assume_role)}"
            )


@dataclass
class SyncOptions:
    """同期オプション"""
    max_parallel: int = DEFAULT_MAX_PARALLEL  # 同時実行数の上限（stat / アップロード共通）
    search_pattern: str = DEFAULT_SEARCH_PATTERN
    exclude_patterns: List[str] = field(default_factory=list)
    dry_run: bool = False
    acl: str = "public-read"
    default_content_type: str = DEFAULT_CONTENT_TYPE
    multipart_threshold: int = 100 * 1024 * 1024  # 100MB
    multipart_chunksize: int = 10 * 1024 * 1024  # 10MB
    max_concurrency: int = 4  # 1ファイル内のパート並列数
    use_threads: bool = True

    def __post_init__(self):
        if self.max_parallel < 1:
            raise ConfigurationError(
                f"Invalid max_parallel: {self.max_parallel}. Must be at least 1"
            )


@dataclass
class SiteConfig:
    """同期対象サイトの設定"""
    name: str
    source: str
    bucket: str

    description: Optional[str] = None
    enabled: bool = True
    search_pattern: Optional[str] = None  # 未指定なら options.search_pattern
    publish: bool = True  # バケットを公開設定にするか


@dataclass
class Config:
    """メイン設定クラス"""
    logging: LoggingConfig
    aws: AWSConfig
    options: SyncOptions
    sites: List[SiteConfig]

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        """辞書から設定を作成"""
        try:
            return cls(
                logging=LoggingConfig(**data.get("logging", {})),
                aws=AWSConfig(**data.get("aws", {})),
                options=SyncOptions(**data.get("options", {})),
                sites=[SiteConfig(**site) for site in data.get("sites", [])],
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @classmethod
    def from_file(cls, config_path: str) -> 'Config':
        """設定ファイルから読み込み"""
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file {config_path} not found.")

        try:
            with open(config_path, "r", encoding="utf-8") as file:
                data = json.load(file)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error decoding JSON from {config_path}: {e}") from e

        return cls.from_dict(data)
