"""Shared fixtures for pivnet-client tests."""

import logging
from unittest.mock import Mock

import pytest
import requests

from pivnet import PivnetClient
from pivnet.cli.config import set_config

from .helpers import HOST, TOKEN


@pytest.fixture
def session():
    """A mocked requests session."""
    return Mock(spec=requests.Session)


@pytest.fixture
def client(session):
    """Create a test API client instance with a mocked session."""
    return PivnetClient(token=TOKEN, host=HOST, session=session)


@pytest.fixture(autouse=True)
def reset_cli_config():
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def root_logger():
    """Restore the root logger after a test reconfigures logging."""
    logger = logging.getLogger()
    handlers, level = logger.handlers[:], logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
