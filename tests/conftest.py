from __future__ import annotations

import os
from pathlib import Path

import pytest
from asyncclick.testing import CliRunner

from talk2m import AuthInfo

FIXTURE_DIR = Path(__file__).parent / "fixtures"

ACCOUNT_VALUES = ("My Co", "bob", "p@ss", "dev1", "tok1")
DEVICE_VALUES = ("dusr", "dpwd")


def load_fixture(filename: str) -> str:
    """Load a fixture."""
    return (FIXTURE_DIR / filename).read_text()


def fixture_path(filename: str) -> str:
    return str(FIXTURE_DIR / filename)


@pytest.fixture()
def auth_info() -> AuthInfo:
    """Return authentication information without device credentials."""
    return AuthInfo(*ACCOUNT_VALUES)


@pytest.fixture()
def device_auth_info() -> AuthInfo:
    """Return authentication information scoped to a device."""
    return AuthInfo(*ACCOUNT_VALUES, *DEVICE_VALUES)


@pytest.fixture()
def runner():
    """Runner fixture that unsets the TALK2M_ environment variables for tests."""
    TALK2M_VARS = {k: None for k in os.environ if k.startswith("TALK2M_")}
    runner = CliRunner(env=TALK2M_VARS)

    return runner
