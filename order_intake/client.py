import logging
from typing import Optional

import httpx

from order_intake.errors import WarehouseError, WarehouseTimeout, WarehouseUnavailable
from order_intake.models import Order

logger = logging.getLogger("order_service.warehouse")


class WarehouseClient:
    """
    Hands new orders to the warehouse for fulfillment.

    Without a base URL the hand-off is only logged.
    """

    def __init__(self, base_url: Optional[str] = None, timeout_ms: int = 1000,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url or None
        self.timeout_ms = timeout_ms
        self._transport = transport

    async def send_order(self, order: Order, correlation_id: Optional[str] = None) -> None:
        logger.info(f"Sending Order {order.order_id}")
        if not self.base_url:
            return

        url = f"{self.base_url}/orders"
        headers = {"X-Correlation-Id": correlation_id} if correlation_id else {}

        async with httpx.AsyncClient(transport=self._transport) as client:
            # Convert ms to seconds
            timeout_sec = self.timeout_ms / 1000.0
            try:
                response = await client.post(
                    url,
                    json=order.model_dump(by_alias=True),
                    headers=headers,
                    timeout=timeout_sec,
                )
            except httpx.TimeoutException:
                logger.error(f"Warehouse timeout for order {order.order_id}")
                raise WarehouseTimeout("Warehouse timed out", order_id=order.order_id)
            except httpx.RequestError as e:
                logger.error(f"Warehouse unreachable for order {order.order_id}: {e}")
                raise WarehouseUnavailable(
                    "Warehouse unreachable", order_id=order.order_id, details={"error": str(e)}
                )

        if response.status_code >= 400:
            logger.error(f"Warehouse rejected order {order.order_id}: {response.status_code}")
            raise WarehouseError(
                "Warehouse returned an error",
                order_id=order.order_id,
                details={"status": response.status_code},
            )
