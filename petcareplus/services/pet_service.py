"""
PetCarePlus Backend: Pet Service
==================================

Pet CRUD on top of ResourceService. owner_id must be an integer but is not
checked against the Owner table.
"""

from typing import Any, Dict

from petcareplus.exceptions import ValidationError
from petcareplus.models.pet import Pet
from petcareplus.schemas.pet import PetCreate, PetResponse, PetUpdate
from petcareplus.services.resource_service import ResourceService
from petcareplus.validators import is_blank, to_int

REQUIRED_MESSAGE = "name, species, and gender are required"


class PetService(ResourceService[PetResponse]):
    model = Pet
    response_schema = PetResponse
    resource_name = "Pet"
    key_name = "pet_id"

    @staticmethod
    def _check_required(payload: PetUpdate) -> None:
        if is_blank(payload.name) or is_blank(payload.species) or is_blank(payload.gender):
            raise ValidationError(REQUIRED_MESSAGE)

    def validate_create(self, payload: PetCreate) -> Dict[str, Any]:
        pet_id = to_int(payload.pet_id)
        owner_id = to_int(payload.owner_id)
        if pet_id is None or owner_id is None:
            raise ValidationError("pet_id and owner_id must be integers")
        self._check_required(payload)
        return {
            "pet_id": pet_id,
            "name": payload.name,
            "species": payload.species,
            "gender": payload.gender,
            "owner_id": owner_id,
        }

    def validate_update(self, payload: PetUpdate) -> Dict[str, Any]:
        owner_id = to_int(payload.owner_id)
        if owner_id is None:
            raise ValidationError("owner_id must be an integer", field="owner_id")
        self._check_required(payload)
        return {
            "name": payload.name,
            "species": payload.species,
            "gender": payload.gender,
            "owner_id": owner_id,
        }


pet_service = PetService()
