import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Empty means orders are only logged, never sent over HTTP
WAREHOUSE_SERVICE_URL = os.getenv("WAREHOUSE_SERVICE_URL", "").rstrip("/")
WAREHOUSE_TIMEOUT_MS = int(os.getenv("WAREHOUSE_TIMEOUT_MS", 1000))

# "store" answers status queries from recorded shipments,
# "placeholder" answers every query with a fixed FedEx record
SHIPMENT_STATUS_MODE = os.getenv("SHIPMENT_STATUS_MODE", "store").lower()

API_TITLE = os.getenv("API_TITLE", "Bmazon APIs")
API_VERSION = os.getenv("API_VERSION", "1.0")
