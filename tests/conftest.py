from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from driver_api.config import Settings
from driver_api.main import create_app
from driver_api.models.driver import DRIVER_FIELDS, DriverModel, DriverStore
from driver_api.utils.object_id import to_object_id


class InMemoryDriverStore:
    """Dict-backed stand-in for DriverStore used by the API tests."""

    def __init__(self):
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}

    async def find_all(self) -> List[DriverModel]:
        return [DriverModel.from_document(document) for document in self.documents.values()]

    async def find_by_id(self, driver_id: str) -> Optional[DriverModel]:
        document = self.documents.get(to_object_id(driver_id))
        return DriverModel.from_document(document) if document else None

    async def create(self, fields: Dict[str, Any]) -> DriverModel:
        document = {"_id": ObjectId(), **{key: fields[key] for key in DRIVER_FIELDS}}
        self.documents[document["_id"]] = document
        return DriverModel.from_document(document)

    async def update_by_id(self, driver_id: str, fields: Dict[str, Any]) -> Optional[DriverModel]:
        document = self.documents.get(to_object_id(driver_id))
        if document is None:
            return None
        document.update({key: fields[key] for key in DRIVER_FIELDS})
        return DriverModel.from_document(document)

    async def delete_by_id(self, driver_id: str) -> Optional[DriverModel]:
        document = self.documents.pop(to_object_id(driver_id), None)
        return DriverModel.from_document(document) if document else None


@pytest.fixture
def settings():
    return Settings(MONGODB_URI="mongodb://localhost:27017", API_PREFIX="/api")


@pytest.fixture
def driver_store():
    return InMemoryDriverStore()


@pytest.fixture
def failing_store():
    """Store whose every call fails the way an unreachable server does."""
    store = AsyncMock(spec=DriverStore)
    error = ServerSelectionTimeoutError("localhost:27017: [Errno 111] Connection refused")
    store.find_all.side_effect = error
    store.find_by_id.side_effect = error
    store.create.side_effect = error
    store.update_by_id.side_effect = error
    store.delete_by_id.side_effect = error
    return store


@pytest.fixture
def test_client(settings, driver_store):
    app = create_app(settings)
    app.state.driver_store = driver_store
    return TestClient(app)


@pytest.fixture
def failing_client(settings, failing_store):
    app = create_app(settings)
    app.state.driver_store = failing_store
    return TestClient(app)


@pytest.fixture
def driver_payload():
    return {
        "name": "Jane Smith",
        "idNumber": "AB123456",
        "email": "jane.smith@example.com",
        "phoneNumber": "+1-555-0199",
    }
