"""Customer info form state"""

from typing import Optional

from ..models.customer import CustomerInfo, ValidationResult

REQUIRED_FIELDS = ("name", "email")


class CustomerInfoForm:
    """Contact fields entered by the shopper, one field at a time"""

    FIELDS = tuple(CustomerInfo.model_fields)

    def __init__(self):
        self._info = CustomerInfo()

    @property
    def info(self) -> CustomerInfo:
        return self._info

    def set_field(self, field: str, value: str) -> CustomerInfo:
        """Replace one field, leaving the others untouched"""
        if field not in self.FIELDS:
            raise ValueError(f"Unknown customer field: {field}")
        self._info = self._info.model_copy(update={field: value})
        return self._info

    def set_name(self, value: str) -> CustomerInfo:
        return self.set_field("name", value)

    def set_email(self, value: str) -> CustomerInfo:
        return self.set_field("email", value)

    def set_phone(self, value: str) -> CustomerInfo:
        return self.set_field("phone", value)

    def set_address(self, value: str) -> CustomerInfo:
        return self.set_field("address", value)

    def update(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        phone: Optional[str] = None,
        address: Optional[str] = None,
    ) -> CustomerInfo:
        """Apply several field setters; None leaves a field alone"""
        changes = {
            "name": name,
            "email": email,
            "phone": phone,
            "address": address,
        }
        for field, value in changes.items():
            if value is not None:
                self.set_field(field, value)
        return self._info

    def validate_for_submission(self) -> ValidationResult:
        """
        Check that name and email are present.

        Whitespace-only values count as missing.
        """
        missing = [
            field for field in REQUIRED_FIELDS
            if not getattr(self._info, field).strip()
        ]
        return ValidationResult(ok=not missing, missing_fields=missing)

    def reset(self) -> None:
        """Clear every field"""
        self._info = CustomerInfo()
