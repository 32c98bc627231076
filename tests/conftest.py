import logging
import uuid

import pytest
from sanic import Sanic

from sanicview.support import Config, EnvHelper


@pytest.fixture(autouse=True)
def clean_state(tmp_path):
    """Isolate class-level config and the package logger between tests"""
    Config.clear_runtime_overrides()
    Config.reload()
    # Point EnvHelper at an empty location so a developer's .env never leaks in
    EnvHelper.reset()
    EnvHelper.initialize(tmp_path / '.env')
    yield
    Config.clear_runtime_overrides()
    Config.reload()
    EnvHelper.reset()
    logger = logging.getLogger('sanicview')
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def views(tmp_path):
    views_dir = tmp_path / 'views'
    views_dir.mkdir()
    return views_dir


@pytest.fixture
def app():
    Sanic.test_mode = True
    return Sanic(f"ViewApp{uuid.uuid4().hex}")
