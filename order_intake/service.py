import logging
from typing import Dict, Optional

from order_intake.client import WarehouseClient
from order_intake.errors import ShipmentNotFound
from order_intake.models import Order, OrderShippingInfo

logger = logging.getLogger("order_service")

STATUS_MODES = ("store", "placeholder")
PLACEHOLDER_CARRIER = "FedEx"
PLACEHOLDER_TRACKING_NUMBER = "abc123"


class OrderService:
    def __init__(self, warehouse: WarehouseClient, status_mode: str = "store"):
        if status_mode not in STATUS_MODES:
            raise ValueError(f"Unknown shipment status mode: {status_mode!r}")
        self.warehouse = warehouse
        self.status_mode = status_mode
        # Latest shipment per order id, lost on restart
        self._shipments: Dict[int, OrderShippingInfo] = {}

    async def submit_order(self, order: Order, correlation_id: Optional[str] = None) -> None:
        await self.warehouse.send_order(order, correlation_id)

    async def record_shipment(self, info: OrderShippingInfo) -> None:
        logger.info(f"Saving Shipping Info for Order {info.order_id}")
        self._shipments[info.order_id] = info

    async def get_shipment_status(self, order_id: int) -> OrderShippingInfo:
        """
        Returns the shipping info for an order.

        Raises ShipmentNotFound if nothing was recorded for it. In placeholder
        mode every valid order id gets the same fixed record instead.
        """
        # Order ids are positive, so nothing can exist for the rest
        if order_id <= 0:
            raise ShipmentNotFound(f"No shipment recorded for order {order_id}", order_id=order_id)

        if self.status_mode == "placeholder":
            return OrderShippingInfo(
                order_id=order_id,
                shipping_carrier=PLACEHOLDER_CARRIER,
                tracking_number=PLACEHOLDER_TRACKING_NUMBER,
            )

        info = self._shipments.get(order_id)
        if info is None:
            raise ShipmentNotFound(f"No shipment recorded for order {order_id}", order_id=order_id)
        return info
