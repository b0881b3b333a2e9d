"""Serialization of customer records for sinks."""

from dataclasses import fields
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from customer_prototype.models import Customer, VipCustomer

MASKED = "********"


def customer_to_dict(customer: Customer, include_credentials: bool = False) -> dict[str, Any]:
    """Convert a customer record to a JSON-ready dict.

    A ``record_type`` tag names the variant so readers can tell base and
    VIP records apart. The password is masked unless ``include_credentials``
    is set.

    Parameters
    ----------
    customer : Customer
        Record to convert.
    include_credentials : bool
        Emit the password in clear text.

    Returns
    -------
    dict
        Serialized record.
    """
    result: dict[str, Any] = {
        "record_type": "vip_customer" if isinstance(customer, VipCustomer) else "customer",
    }
    for f in fields(customer):
        result[f.name] = serialize_value(getattr(customer, f.name))

    if not include_credentials:
        result["password"] = MASKED
    return result


def to_dict(obj: Any) -> dict:
    """Convert a record, or pass a dict through."""
    if isinstance(obj, Customer):
        return customer_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, (datetime, date)):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
