"""ORM models. Importing this package registers every table on Base.metadata."""

from rentals.models import (  # noqa: F401
    contract,
    landlord,
    property,
    rent_payment,
    tenant,
    unit,
    unit_pairing,
    user,
    utility,
)
