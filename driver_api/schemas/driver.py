# driver_api/schemas/driver.py
from pydantic import BaseModel, ConfigDict, Field

class DriverBase(BaseModel):
    name: str = Field(..., min_length=1)
    idNumber: str = Field(..., min_length=1, description="Identity document number")
    email: str = Field(..., min_length=1)
    phoneNumber: str = Field(..., min_length=1)

    # Numbers are stored as their string form
    model_config = ConfigDict(coerce_numbers_to_str=True)

class DriverCreate(DriverBase):
    pass

class DriverUpdate(DriverBase):
    pass

class DriverOut(BaseModel):
    id: str = Field(..., description="Driver ID as a string", examples=["507f1f77bcf86cd799439011"])
    name: str
    idNumber: str
    email: str
    phoneNumber: str

    model_config = ConfigDict(from_attributes=True)

class DriverDeleted(BaseModel):
    message: str
