"""
PetCarePlus Backend: Owner Service
====================================

What:  Owner CRUD on top of ResourceService, plus the body validation:
       integer owner_id (create only), required names and email, and the
       email shape check shared with login.
"""

from typing import Any, Dict

from petcareplus.exceptions import ValidationError
from petcareplus.models.owner import Owner
from petcareplus.schemas.owner import OwnerBase, OwnerCreate, OwnerResponse, OwnerUpdate
from petcareplus.services.resource_service import ResourceService
from petcareplus.validators import is_blank, to_int, validate_email


class OwnerService(ResourceService[OwnerResponse]):
    model = Owner
    response_schema = OwnerResponse
    resource_name = "Owner"
    key_name = "owner_id"

    def _owner_fields(self, payload: OwnerBase) -> Dict[str, Any]:
        if is_blank(payload.first_name) or is_blank(payload.last_name) or is_blank(payload.email):
            raise ValidationError("first_name, last_name, and email are required")
        if not validate_email(payload.email):
            raise ValidationError("Invalid email format", field="email")
        return {
            "first_name": payload.first_name,
            "last_name": payload.last_name,
            "phone": payload.phone or "",
            "email": payload.email,
            "address": payload.address or "",
        }

    def validate_create(self, payload: OwnerCreate) -> Dict[str, Any]:
        owner_id = to_int(payload.owner_id)
        if owner_id is None:
            raise ValidationError("owner_id must be an integer", field="owner_id")
        return {"owner_id": owner_id, **self._owner_fields(payload)}

    def validate_update(self, payload: OwnerUpdate) -> Dict[str, Any]:
        return self._owner_fields(payload)


owner_service = OwnerService()
