from typing import Optional, Dict, Any


class OrderServiceError(Exception):
    """Base for failures that map onto an HTTP error response."""
    status_code = 500
    code = "ORDER_SERVICE_ERROR"

    def __init__(self, message: str, order_id: Optional[int] = None,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.order_id = order_id
        self.details = details


class ShipmentNotFound(OrderServiceError):
    status_code = 404
    code = "SHIPMENT_NOT_FOUND"


class WarehouseError(OrderServiceError):
    status_code = 502
    code = "WAREHOUSE_ERROR"


class WarehouseTimeout(WarehouseError):
    status_code = 504
    code = "WAREHOUSE_TIMEOUT"


class WarehouseUnavailable(WarehouseError):
    status_code = 503
    code = "WAREHOUSE_UNREACHABLE"
