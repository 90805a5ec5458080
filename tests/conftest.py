import httpx
import pytest
import pytest_asyncio

from order_intake.client import WarehouseClient
from order_intake.main import app, get_order_service
from order_intake.service import OrderService


@pytest.fixture
def warehouse():
    return WarehouseClient()


@pytest.fixture
def service(warehouse):
    return OrderService(warehouse)


@pytest_asyncio.fixture
async def client(service):
    app.dependency_overrides[get_order_service] = lambda: service
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    app.dependency_overrides.clear()
