# driver_api/models/driver.py
import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pymongo import ReturnDocument

from driver_api.utils.object_id import to_object_id

logger = logging.getLogger(__name__)

DRIVER_FIELDS = ("name", "idNumber", "email", "phoneNumber")


class DriverModel(BaseModel):
    id: str = Field(alias="_id")
    name: str
    idNumber: str
    email: str
    phoneNumber: str

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "DriverModel":
        return cls(**{**document, "_id": str(document["_id"])})


class DriverStore:
    """Driver persistence on top of a single Motor collection.

    Lookups by an id that is not a valid ObjectId return None without
    touching the database. Driver errors from Motor are not caught here.
    """

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def find_all(self) -> List[DriverModel]:
        documents = await self.collection.find({}).to_list(length=None)
        drivers = []
        for document in documents:
            try:
                drivers.append(DriverModel.from_document(document))
            except ValidationError:
                # Records written outside this API may lack fields
                logger.warning("Skipping malformed driver document %s", document.get("_id"))
        return drivers

    async def find_by_id(self, driver_id: str) -> Optional[DriverModel]:
        driver_oid = to_object_id(driver_id)
        if driver_oid is None:
            return None

        document = await self.collection.find_one({"_id": driver_oid})
        return DriverModel.from_document(document) if document else None

    async def create(self, fields: Dict[str, Any]) -> DriverModel:
        document = {key: fields[key] for key in DRIVER_FIELDS}
        result = await self.collection.insert_one(document)
        logger.debug("Inserted driver %s", result.inserted_id)
        return DriverModel.from_document({**document, "_id": result.inserted_id})

    async def update_by_id(self, driver_id: str, fields: Dict[str, Any]) -> Optional[DriverModel]:
        driver_oid = to_object_id(driver_id)
        if driver_oid is None:
            return None

        document = await self.collection.find_one_and_update(
            {"_id": driver_oid},
            {"$set": {key: fields[key] for key in DRIVER_FIELDS}},
            return_document=ReturnDocument.AFTER
        )
        return DriverModel.from_document(document) if document else None

    async def delete_by_id(self, driver_id: str) -> Optional[DriverModel]:
        driver_oid = to_object_id(driver_id)
        if driver_oid is None:
            return None

        document = await self.collection.find_one_and_delete({"_id": driver_oid})
        return DriverModel.from_document(document) if document else None
