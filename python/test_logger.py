#!/usr/bin/env python3
"""ロガーのテスト"""
import logging

import pytest

from s3_site_sync.models.config import LoggingConfig
from s3_site_sync.core.plan import ExecutionPlanBuilder
from s3_site_sync.core.sync import SiteSynchronizer, SyncState
from s3_site_sync.utils.logger import LOGGER_NAME, LoggerManager


@pytest.fixture
def fresh_logger():
    LoggerManager.reset()
    yield
    LoggerManager.reset()


def test_get_logger_before_setup(fresh_logger):
    logger = LoggerManager.get_logger()
    assert logger is logging.getLogger(LOGGER_NAME)
    assert logger.handlers == []


def test_setup_writes_to_file(fresh_logger, tmp_path):
    log_file = tmp_path / "logs" / "s3_site_sync.log"
    logger = LoggerManager.setup(LoggingConfig(level="warning", file=str(log_file)))

    assert logger.level == logging.WARNING
    assert LoggerManager.get_logger() is logger

    logger.info("not written")
    logger.warning("written")
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "WARNING - written" in content
    assert "not written" not in content


def test_setup_is_cached(fresh_logger):
    first = LoggerManager.setup(LoggingConfig(level="INFO"))
    second = LoggerManager.setup(LoggingConfig(level="DEBUG"))
    assert first is second
    assert second.level == logging.INFO


def test_components_work_without_setup(fresh_logger, site_tree, fake_s3):
    tasks = ExecutionPlanBuilder().build(str(site_tree))
    assert {t.remote_path for t in tasks} == {"index.html", "css/style.css"}

    sync = SiteSynchronizer(fake_s3)
    sync.synchronize(str(site_tree), "**", "my-bucket")
    assert sync.state is SyncState.DONE
