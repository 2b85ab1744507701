"""Customer contact models"""

from typing import Optional

from pydantic import BaseModel


class CustomerInfo(BaseModel):
    """Contact and delivery details entered by the shopper"""
    name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""


class CustomerInfoUpdate(BaseModel):
    """Partial update of customer info; omitted fields are left alone"""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None


class ValidationResult(BaseModel):
    """Outcome of the pre-submission presence check"""
    ok: bool
    missing_fields: list[str] = []
