# driver_api/schemas/__init__.py
from .driver import DriverCreate, DriverUpdate, DriverOut, DriverDeleted
