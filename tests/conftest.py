"""Shared fixtures: fake assets, a recording remote service, Flask client."""

import base64
from collections import defaultdict

import pytest

from src.deck_generation.config import ServiceConfig
from src.deck_generation.errors import RemoteOperationError
from src.deck_generation.layouts import ICON_FILES
from src.deck_generation.models import DeckAssets

FAKE_ICONS = tuple(base64.b64encode(f"icon-{i}".encode()).decode() for i in range(1, 5))


class FakeSlidesService:
    """Records every capability call; shape indices are 1-based per slide."""

    def __init__(self, exists=False, fail_on=None, shape_index_offset=0):
        self.calls = []
        self.exists = exists
        self.fail_on = fail_on
        self.shape_index_offset = shape_index_offset
        self._next_index = defaultdict(int)

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if self.fail_on == name:
            raise RemoteOperationError(name, "simulated failure")

    def call_names(self):
        return [c[0] for c in self.calls]

    def object_exists(self, name):
        self._record("object_exists", name)
        return self.exists

    def delete_file(self, name):
        self._record("delete_file", name)

    def create_presentation(self, name):
        self._record("create_presentation", name)

    def set_slide_properties(self, name, props):
        self._record("set_slide_properties", name, props)

    def copy_master_slide(self, name, source, source_slide_index, apply_to_all):
        self._record("copy_master_slide", name, source, source_slide_index, apply_to_all)

    def create_slide(self, name):
        self._record("create_slide", name)

    def create_shape(self, name, slide_index, spec):
        self._record("create_shape", name, slide_index, spec)
        self._next_index[slide_index] += 1
        return self._next_index[slide_index] + self.shape_index_offset

    def update_shape(self, name, slide_index, shape_index, anchoring, line):
        self._record("update_shape", name, slide_index, shape_index, anchoring, line)

    def update_text_portion(self, name, slide_index, shape_index, paragraph_index, portion_index, text, style):
        self._record(
            "update_text_portion", name, slide_index, shape_index, paragraph_index, portion_index, text, style
        )

    def set_animation(self, name, slide_index, effects, shape_indices):
        self._record("set_animation", name, slide_index, tuple(effects), tuple(shape_indices))

    def set_slide_transition(self, name, slide_index, transition_type):
        self._record("set_slide_transition", name, slide_index, transition_type)

    def download_url(self, name):
        return f"https://api.aspose.cloud/v3.0/slides/{name}/download"


@pytest.fixture
def assets():
    return DeckAssets(icons=FAKE_ICONS)


@pytest.fixture
def service_factory():
    return FakeSlidesService


@pytest.fixture
def fake_service():
    return FakeSlidesService()


@pytest.fixture
def asset_dirs(tmp_path):
    icon_dir = tmp_path / "icon"
    icon_dir.mkdir()
    for name in ICON_FILES:
        (icon_dir / name).write_bytes(f"bytes-of-{name}".encode())
    return tmp_path


@pytest.fixture
def config(asset_dirs):
    return ServiceConfig(
        client_id="id",
        client_secret="secret",
        icon_dir=str(asset_dirs / "icon"),
        logo_path=str(asset_dirs / "missing-logo.jpg"),
        upload_folder=str(asset_dirs / "uploads"),
    )


@pytest.fixture
def app(config, fake_service):
    from app import create_app

    flask_app = create_app(config=config, service=fake_service)
    flask_app.config["TESTING"] = True
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
