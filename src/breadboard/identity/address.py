"""DeliveryAddress aggregate: reference data selected at checkout.

Orders copy the address by value, so editing an address never rewrites
order history.
"""

from protean.exceptions import ObjectNotFoundError
from protean.fields import String
from protean.utils.globals import current_domain

from breadboard.domain import FETCH_LIMIT, breadboard
from breadboard.errors import AddressNotFound


@breadboard.aggregate
class DeliveryAddress:
    company_name = String(required=True, max_length=255)
    street_address = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    contact_name = String(max_length=255)
    contact_phone = String(max_length=30)


@breadboard.repository(part_of=DeliveryAddress)
class DeliveryAddressRepository:
    def all_addresses(self) -> list[DeliveryAddress]:
        addresses = self._dao.query.limit(FETCH_LIMIT).all().items
        return sorted(addresses, key=lambda address: str(address.id))


def list_addresses() -> list[DeliveryAddress]:
    return current_domain.repository_for(DeliveryAddress).all_addresses()


def get_address(address_id: str) -> DeliveryAddress:
    try:
        return current_domain.repository_for(DeliveryAddress).get(address_id)
    except ObjectNotFoundError:
        raise AddressNotFound() from None
