from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Dict, Any, List

# Wire format is camelCase; snake_case names are accepted too
_wire_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class OrderLineItem(BaseModel):
    """A single line item in an order."""
    model_config = _wire_config

    quantity: int = Field(..., ge=1, le=1000, strict=True, description="The number of the SKU desired")
    sku: str = Field(..., min_length=1, description="The SKU identifying the item to purchase")


class Order(BaseModel):
    model_config = _wire_config

    order_id: int = Field(..., gt=0, strict=True)
    items: List[OrderLineItem] = Field(..., min_length=1)


class OrderShippingInfo(BaseModel):
    model_config = _wire_config

    order_id: int = Field(..., gt=0, strict=True)
    shipping_carrier: str = Field(..., min_length=1)
    tracking_number: str = Field(..., min_length=1)


class ErrorDetail(BaseModel):
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    order_id: Optional[int] = None
    correlation_id: Optional[str] = None


class ErrorResponse(BaseModel):
    error: ErrorDetail
