"""Shared test fixtures"""

import json
import logging

import pytest

from component_publisher.models import Credentials
from component_publisher.services import CredentialBroker

from .fakes import FakePrompter


@pytest.fixture
def prompter():
    return FakePrompter()


@pytest.fixture
def test_logger():
    return logging.getLogger("tests.publish")


@pytest.fixture
def broker(prompter, test_logger):
    return CredentialBroker(prompter, test_logger)


@pytest.fixture
def credentials():
    return Credentials(username="alice", password="secret")


@pytest.fixture
def component_dir(tmp_path):
    """A minimal component directory"""
    path = tmp_path / "hello-world"
    path.mkdir()
    (path / "package.json").write_text(json.dumps({
        "name": "hello-world",
        "version": "1.0.0",
        "description": "Test component",
    }))
    (path / "template.html").write_text("<div>Hello</div>")
    (path / "server.js").write_text("module.exports = {};")
    (path / "node_modules").mkdir()
    (path / "node_modules" / "dep.js").write_text("ignored")
    return path
