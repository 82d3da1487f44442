APP_NAME = "POS Front End"

# QSettings key-space for persisted client state
SETTINGS_ORG = "PosFrontend"
SETTINGS_APP = "PosFrontend"
SETTINGS_KEY_OUTLET_ID = "pos/outlet_id"

DEFAULT_OUTLET_ID = 1

DEFAULT_API_URL = "http://localhost:3000/api"
DEFAULT_REQUEST_TIMEOUT = 15.0

# Page sizes
CUSTOMERS_PAGE_SIZE = 10
PRODUCTS_PAGE_SIZE = 10
INVOICES_PAGE_SIZE = 10
STOCKS_PAGE_SIZE = 20

# Debounce windows (ms)
MODAL_SEARCH_DEBOUNCE_MS = 400
STOCK_SEARCH_DEBOUNCE_MS = 500
