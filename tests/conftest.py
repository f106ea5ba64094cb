"""Shared fixtures for the fee calculator tests."""
import logging
from pathlib import Path

import pytest

from config.loader import LoggingCfg, NurseryCfg, PathsCfg, UnifiedConfig
from core.models import FeeScheduleCfg


@pytest.fixture
def schedule():
    return FeeScheduleCfg()


@pytest.fixture
def unified_config(tmp_path: Path) -> UnifiedConfig:
    return UnifiedConfig(
        nursery=NurseryCfg(name="Little Lodge Nursery", contact_email="info@littlelodgenursery.com"),
        fees=FeeScheduleCfg(),
        paths=PathsCfg(
            inputs_dir=tmp_path / "inputs",
            data_dir=tmp_path / "data",
            reports_dir=tmp_path / "reports",
            config_dir=tmp_path / "config",
        ),
        logging=LoggingCfg(),
    )


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after a test calls setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for h in root.handlers[:]:
        if h not in handlers:
            h.close()
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
