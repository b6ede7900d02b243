# driver_api/routes/driver.py
import logging
from typing import List

from fastapi import APIRouter, HTTPException, Depends, status

from driver_api.database import get_driver_store
from driver_api.errors import DRIVER_NOT_FOUND, INTERNAL_SERVER_ERROR
from driver_api.models.driver import DriverStore
from driver_api.schemas.driver import DriverCreate, DriverUpdate, DriverOut, DriverDeleted

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/drivers")

def internal_error() -> HTTPException:
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_SERVER_ERROR)

def not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=DRIVER_NOT_FOUND)

@router.get("", response_model=List[DriverOut], summary="Get all drivers")
async def get_all_drivers(store: DriverStore = Depends(get_driver_store)):
    try:
        drivers = await store.find_all()
    except Exception:
        logger.exception("Failed to list drivers")
        raise internal_error()

    return [DriverOut.model_validate(driver) for driver in drivers]

@router.get("/{driver_id}", response_model=DriverOut, summary="Get driver by ID")
async def get_driver_by_id(driver_id: str, store: DriverStore = Depends(get_driver_store)):
    try:
        driver = await store.find_by_id(driver_id)
    except Exception:
        logger.exception("Failed to fetch driver %s", driver_id)
        raise internal_error()

    if driver is None:
        raise not_found()
    return DriverOut.model_validate(driver)

@router.post("", response_model=DriverOut, status_code=status.HTTP_201_CREATED, summary="Create a new driver")
async def create_driver(driver: DriverCreate, store: DriverStore = Depends(get_driver_store)):
    try:
        created_driver = await store.create(driver.model_dump())
    except Exception:
        logger.exception("Failed to create driver")
        raise internal_error()

    return DriverOut.model_validate(created_driver)

@router.put("/{driver_id}", response_model=DriverOut, summary="Update driver by ID")
async def update_driver(driver_id: str, driver: DriverUpdate, store: DriverStore = Depends(get_driver_store)):
    try:
        updated_driver = await store.update_by_id(driver_id, driver.model_dump())
    except Exception:
        logger.exception("Failed to update driver %s", driver_id)
        raise internal_error()

    if updated_driver is None:
        raise not_found()
    return DriverOut.model_validate(updated_driver)

@router.delete("/{driver_id}", response_model=DriverDeleted, summary="Delete driver by ID")
async def delete_driver(driver_id: str, store: DriverStore = Depends(get_driver_store)):
    try:
        deleted_driver = await store.delete_by_id(driver_id)
    except Exception:
        logger.exception("Failed to delete driver %s", driver_id)
        raise internal_error()

    if deleted_driver is None:
        raise not_found()
    return DriverDeleted(message="Driver deleted successfully")
