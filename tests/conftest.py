"""Pytest configuration and fixtures for cc-switch-tools tests."""

import io
import logging
import os
import tarfile
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

# Must be set before cc_switch_tools is imported: module loggers are created
# at import time and would otherwise open ~/.config/cc-switch-tools/logs.
os.environ.setdefault(
    "CC_SWITCH_TOOLS_LOG_DIR",
    str(Path(tempfile.gettempdir()) / "cc-switch-tools-pytest-logs"),
)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation so caplog sees cc_switch_tools records.

    The root cc_switch_tools logger is created with propagate=False in
    production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("cc_switch_tools"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory building .tar.gz archives in tmp_path.

    Usage:
        archive = make_archive({"cc-switch": b"#!/bin/sh\\n"})
    """

    def _make(
        members: dict[str, bytes], name: str = "asset.tar.gz"
    ) -> Path:
        archive = tmp_path / "archives" / name
        archive.parent.mkdir(parents=True, exist_ok=True)
        with tarfile.open(archive, mode="w:gz") as tar:
            for member_name, data in members.items():
                info = tarfile.TarInfo(member_name)
                info.size = len(data)
                info.mode = 0o755
                tar.addfile(info, io.BytesIO(data))
        return archive

    return _make
