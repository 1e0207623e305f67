#!/usr/bin/env python3
"""
Global pytest configuration and fixtures.

This module provides:
- Isolation of the chain-cal working directory per test
- Temporary directories and sample marks files
"""

import os
import shutil
import sys
import tempfile
from typing import Generator

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from chain_cal.core.paths import reset_path_manager


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Point CHAIN_CAL_HOME at a throwaway directory for every test."""
    home = tmp_path / "chain-cal-home"
    monkeypatch.setenv("CHAIN_CAL_HOME", str(home))
    reset_path_manager()
    yield home
    reset_path_manager()


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = tempfile.mkdtemp(prefix="chain_cal_test_")
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


SAMPLE_MARKS = """# Sample marks
2005-02-05
2006-01-01
2006-02-01
2006-02-15
2006-02-28
2006-03-01

2006-11-30
2006-12-31
2007-01-01
2007-01-02
!2007-01-02
"""


@pytest.fixture
def marks_file(temp_dir: str) -> str:
    """Write a marks file covering 2005-2007."""
    path = os.path.join(temp_dir, "marks.txt")
    with open(path, 'w', encoding='utf-8') as f:
        f.write(SAMPLE_MARKS)
    return path


@pytest.fixture
def missing_config(temp_dir: str) -> str:
    """Path to a config file that does not exist."""
    return os.path.join(temp_dir, "no-such-config.json")
