import logging

import pytest

from core import TaskRecord, build_registry

GT_ENV_VARS = ("GT_THEME", "GT_TASK_BIN", "GT_LOG_LEVEL", "GT_LOG_FILE", "GT_TUI_TTIMEOUTLEN")


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Keep the developer's ~/.gt_config.yaml and GT_* variables out of tests."""
    monkeypatch.setenv("GT_CONFIG", str(tmp_path / "gt_config.yaml"))
    for name in GT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def registry():
    return build_registry(
        [
            TaskRecord("build", "Build the binary", ("go build ./...", "strip bin/app")),
            TaskRecord("test", "", ("go test ./...",)),
            TaskRecord("deploy", "Ship it"),
        ]
    )


@pytest.fixture(autouse=True)
def reset_gt_logger():
    """Undo setup_logging between tests so caplog keeps seeing gt.* records."""
    yield
    logger = logging.getLogger("gt")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
