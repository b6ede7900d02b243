#driver_api/routes/__init__.py

from .driver import router as driver_router
