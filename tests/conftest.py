# -*- coding: utf-8 -*-
"""
Shared fixtures for the Template Studio tests.
"""
import os
import sys
import threading
from pathlib import Path

import pytest

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from models.component_region import ComponentRegion
from services.exceptions import ApiException
from services.wizard.draft_store import WizardDraftStore
from services.wizard.logical_steps import LogicalStep
from services.wizard.state_manager import WizardStateManager
from services.wizard.step_data import (
    UploadData, ComponentDefinitionData, MetadataData, SummaryData
)


class FakeApiClient:
    """In-memory stand-in for TemplateApiClient."""

    def __init__(self):
        self.calls = []
        self.categories = [{"id": "cat-1", "name": "Marketing"}, {"id": "cat-2", "name": "Blog"}]
        self.upload_error = None
        self.categories_error = None
        self.create_error = None
        self.category_error = None
        self.template_id = "tpl-123"
        self.created = []
        # When set, create_template blocks until the event is set
        self.release_create = None

    def initiate_upload(self, file_name, file_type, file_size):
        self.calls.append(("initiate_upload", file_name, file_type, file_size))
        if self.upload_error:
            raise self.upload_error
        return {"uploadId": "up-1", "presignedUrl": "https://storage.test/put/up-1"}

    def upload_to_storage(self, presigned_url, content, content_type):
        self.calls.append(("upload_to_storage", presigned_url, len(content), content_type))

    def complete_upload(self, upload_id, file_name):
        self.calls.append(("complete_upload", upload_id, file_name))
        return {"uploadId": upload_id, "publicUrl": f"https://cdn.test/{file_name}"}

    def get_categories(self):
        self.calls.append(("get_categories",))
        if self.categories_error:
            raise self.categories_error
        return list(self.categories)

    def create_template(self, template_data):
        self.calls.append(("create_template",))
        if self.release_create is not None:
            self.release_create.wait(5)
        if self.create_error:
            raise self.create_error
        self.created.append(template_data)
        return self.template_id

    def create_category(self, name, description=None):
        self.calls.append(("create_category", name))
        if self.category_error:
            raise self.category_error
        category = {"id": f"cat-{len(self.categories) + 1}", "name": name}
        self.categories.append(category)
        return category


@pytest.fixture
def api_client():
    return FakeApiClient()


@pytest.fixture
def draft_store(tmp_path):
    return WizardDraftStore(tmp_path / "drafts" / "wizard.json")


@pytest.fixture
def manager():
    return WizardStateManager()


def make_upload(file_name="hero.png", file_type="image/png", uploaded=True):
    return UploadData(
        file_name=file_name,
        file_type=file_type,
        file_size=2048,
        upload_id="up-1" if uploaded else None,
        public_url=f"https://cdn.test/{file_name}" if uploaded else None,
        is_uploaded=uploaded,
        upload_progress=100 if uploaded else 0,
    )


def make_metadata(name="Landing", category_id="cat-1"):
    return MetadataData(
        name=name,
        description="A landing page",
        category_id=category_id,
        category_name="Marketing" if category_id else "",
        tags=["hero", "sale"],
    )


def make_components():
    return ComponentDefinitionData(components=[
        ComponentRegion(id="region_a", x=10, y=20, width=200, height=40, label="Title")
    ])


def fill_to_summary(manager, png=True):
    """Drive a manager through valid steps up to the summary step."""
    if png:
        manager.update_step_data(LogicalStep.UPLOAD, make_upload())
        assert manager.next_step()
        manager.update_step_data(LogicalStep.COMPONENT_DEFINITION, make_components())
        assert manager.next_step()
    else:
        manager.update_step_data(LogicalStep.UPLOAD, make_upload("design.fig", "application/figma"))
        assert manager.next_step()
    manager.update_step_data(LogicalStep.METADATA, make_metadata())
    assert manager.next_step()


def fill_to_final(manager, png=True):
    fill_to_summary(manager, png)
    manager.update_step_data(LogicalStep.SUMMARY, SummaryData(is_reviewed=True))
    assert manager.next_step()


def server_error(message="DB unavailable"):
    return ApiException(message=message, status_code=500, response_data={"message": message})


@pytest.fixture
def blocking_event():
    event = threading.Event()
    yield event
    event.set()
