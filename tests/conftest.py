import os
import sys

import pytest

# Ensure the project root (containing the `subber` package) is on sys.path
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from subber.models import Player
from subber.services import Tracker
from subber.ui import create_app


@pytest.fixture()
def tracker():
    return Tracker([
        Player(name="kunio", number=86),
        Player(name="alice", number=7),
        Player(name="bob", number=10),
    ])


@pytest.fixture()
def flask_app(tracker):
    application = create_app(tracker)
    application.config["TESTING"] = True
    return application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()
