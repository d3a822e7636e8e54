"""ロギング設定ユーティリティ"""
import logging
import os
from typing import Optional, List
from ..models.config import LoggingConfig


LOGGER_NAME = "s3_site_sync"


class LoggerManager:
    """ロガーの設定と管理"""

    _logger: Optional[logging.Logger] = None

    @classmethod
    def setup(cls, config: LoggingConfig) -> logging.Logger:
        """ロガーをセットアップ（2回目以降は既存のものを返す）"""
        if cls._logger is not None:
            return cls._logger

        log_level = getattr(logging, config.level.upper(), logging.INFO)
        formatter = logging.Formatter(config.format, datefmt="%Y-%m-%d %H:%M:%S")

        handlers: List[logging.Handler] = [logging.StreamHandler()]

        if config.file:
            log_dir = os.path.dirname(config.file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handlers.append(logging.FileHandler(config.file, encoding="utf-8"))

        for handler in handlers:
            handler.setFormatter(formatter)

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(log_level)
        logger.handlers = handlers

        cls._logger = logger
        return logger

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """設定済みのロガーを取得（未設定なら標準のロガー階層に従う）"""
        if cls._logger is None:
            return logging.getLogger(LOGGER_NAME)
        return cls._logger

    @classmethod
    def reset(cls):
        """ハンドラーを閉じて未設定状態に戻す"""
        if cls._logger is not None:
            for handler in cls._logger.handlers:
                handler.close()
            cls._logger.handlers = []
        cls._logger = None
