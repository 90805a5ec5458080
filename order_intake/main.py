import logging
from typing import List

from fastapi import Depends, FastAPI, Path, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from order_intake import ids
from order_intake.client import WarehouseClient
from order_intake.config import (
    API_TITLE,
    API_VERSION,
    LOG_LEVEL,
    SHIPMENT_STATUS_MODE,
    WAREHOUSE_SERVICE_URL,
    WAREHOUSE_TIMEOUT_MS,
)
from order_intake.errors import OrderServiceError
from order_intake.models import Order, OrderShippingInfo, ErrorResponse, ErrorDetail
from order_intake.service import OrderService

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger("order_service")

order_service = OrderService(
    WarehouseClient(WAREHOUSE_SERVICE_URL, WAREHOUSE_TIMEOUT_MS),
    status_mode=SHIPMENT_STATUS_MODE,
)


def get_order_service() -> OrderService:
    return order_service


app = FastAPI(
    title=API_TITLE,
    version=API_VERSION,
    openapi_url="/openapi/json",
    docs_url="/openapi/ui",
    redoc_url=None,
)

VALIDATION_ERRORS = {
    400: {"model": List[str], "description": "A list of data validation errors"},
}


@app.middleware("http")
async def add_correlation_id(request: Request, call_next):
    correlation_id = request.headers.get("X-Correlation-Id")
    if not correlation_id:
        correlation_id = ids.generate_correlation_id()

    # Store in request state for access in endpoints
    request.state.correlation_id = correlation_id

    response = await call_next(request)
    response.headers["X-Correlation-Id"] = correlation_id
    return response


def _format_validation_error(error: dict) -> str:
    # Drop the "body"/"path" prefix so messages name the field as the client sent it
    loc = [str(part) for part in error.get("loc", ())]
    field = ".".join(loc[1:]) or ".".join(loc)
    return f"{field}: {error.get('msg', 'invalid')}"


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    messages = [_format_validation_error(e) for e in exc.errors()]
    logger.warning(f"Rejected {request.method} {request.url.path}: {messages}")
    return JSONResponse(status_code=400, content=messages)


@app.exception_handler(OrderServiceError)
async def order_service_exception_handler(request: Request, exc: OrderServiceError):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error=ErrorDetail(
                code=exc.code,
                message=exc.message,
                details=exc.details,
                order_id=exc.order_id,
                correlation_id=getattr(request.state, "correlation_id", None)
            )
        ).model_dump()
    )


@app.get("/health")
def health():
    return {"status": "ok", "service": "order"}


@app.post("/order", response_model=str, responses=VALIDATION_ERRORS)
async def create_order(request: Request, order: Order,
                       service: OrderService = Depends(get_order_service)):
    """Creates an Order that will be shipped to the Warehouse for fulfillment."""
    correlation_id = request.state.correlation_id
    logger.info(f"Received order {order.order_id} with correlation_id {correlation_id}")

    await service.submit_order(order, correlation_id)

    return "Order Created Successfully"


@app.post("/order/shipment", response_class=Response, responses=VALIDATION_ERRORS)
async def order_shipped(request: Request, info: OrderShippingInfo,
                        service: OrderService = Depends(get_order_service)):
    """Called to tell the system that an Order has shipped from the warehouse."""
    logger.info(f"Shipment reported for order {info.order_id}, correlation {request.state.correlation_id}")

    await service.record_shipment(info)

    return Response(status_code=200)


@app.get(
    "/order/shipment/{id}",
    response_model=OrderShippingInfo,
    responses={404: {"model": ErrorResponse, "description": "The order has not shipped yet"}, **VALIDATION_ERRORS},
)
async def order_shipping_status(request: Request, id: int = Path(..., description="The order id"),
                                service: OrderService = Depends(get_order_service)):
    """Gets the current Shipping Information for an order, if present."""
    logger.info(f"Shipping status requested for order {id}, correlation {request.state.correlation_id}")

    return await service.get_shipment_status(id)
