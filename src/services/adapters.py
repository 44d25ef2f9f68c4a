"""Pure mappings from upstream owner records to customer entities."""

from typing import Iterable, List, Optional

from models.customer import Customer, CustomerDetail, Pet
from models.owner import RawOwnerRecord, RawPet

SOURCE_NAME = "petclinic"
UNKNOWN_PET_TYPE = "Unknown"


def _full_name(owner: RawOwnerRecord) -> str:
    return f"{owner.first_name or ''} {owner.last_name or ''}".strip()


def map_owner_to_customer(owner: RawOwnerRecord) -> Customer:
    """Map an owner to the list-view customer."""
    return Customer(
        id=str(owner.id),
        name=_full_name(owner),
        city=owner.city,
        address=owner.address,
        phone=owner.telephone,
        pets_count=len(owner.pets or []),
        # Petclinic owners do not expose an email address.
        email=None,
        created_from=SOURCE_NAME,
    )


def map_owners_to_customers(owners: Optional[Iterable[RawOwnerRecord]]) -> List[Customer]:
    if not owners:
        return []
    return [map_owner_to_customer(owner) for owner in owners]


def _map_pet(pet: RawPet) -> Pet:
    pet_type = pet.type.name if pet.type is not None and pet.type.name is not None else UNKNOWN_PET_TYPE
    return Pet(id=pet.id, name=pet.name, birth_date=pet.birth_date, type=pet_type)


def map_owner_to_customer_detail(owner: RawOwnerRecord) -> CustomerDetail:
    """
    Map an owner to the detail-view customer.

    Missing contact fields become ``None`` and a pet without a type reports
    ``"Unknown"``; the detail page renders each case differently.
    """
    return CustomerDetail(
        id=owner.id,
        full_name=_full_name(owner),
        address=owner.address,
        city=owner.city,
        telephone=owner.telephone,
        pets=[_map_pet(pet) for pet in owner.pets or []],
    )
