# tests/test_repos.py
from unittest.mock import MagicMock

from pos_frontend.api.customers_repo import CustomersRepo, customer_label, Customer
from pos_frontend.api.invoices_repo import InvoicesRepo, RecalledInvoice
from pos_frontend.api.items_repo import ItemsRepo
from pos_frontend.api.stocks_repo import StocksRepo


def client_returning(payload):
    client = MagicMock()
    client.get.return_value = payload
    return client


# ---------- customers ----------

def test_customers_search_params_and_rows():
    client = client_returning({"data": [{"id": 3, "first_name": "Ann", "last_name": "Lee",
                                         "telephone": "0300"}], "total": 11})
    page = CustomersRepo(client).search(2, "  ann ", limit=10)

    client.get.assert_called_once_with("/pos/customers",
                                       params={"page": 2, "limit": 10, "search": "ann"})
    assert page.total == 11
    assert page.items[0].display_name == "Ann Lee"
    assert page.items[0].telephone == "0300"


def test_customers_empty_query_sends_no_search_param():
    client = client_returning([])
    CustomersRepo(client).fetcher(10)(1, "   ")
    client.get.assert_called_once_with("/pos/customers", params={"page": 1, "limit": 10})


def test_customer_label():
    assert customer_label(None) == "None"
    assert customer_label(Customer(id=4, first_name="", last_name="")) == "Customer #4"
    assert customer_label(Customer(id=4, first_name="Zed", last_name="")) == "Zed"


# ---------- items ----------

def test_items_search_parses_rows():
    client = client_returning([{"id": "5", "name": "Bolt", "sku": "B-1", "origin": "PK"}])
    page = ItemsRepo(client).search(1, "bolt")
    client.get.assert_called_once_with("/store/items",
                                       params={"page": 1, "limit": 10, "search": "bolt"})
    item = page.items[0]
    assert (item.id, item.name, item.sku, item.origin) == (5, "Bolt", "B-1", "PK")


# ---------- stocks ----------

def test_stocks_search_uses_take_skip_name():
    client = client_returning({"data": [], "total": 0})
    StocksRepo(client).search(3, "nut", take=20)
    client.get.assert_called_once_with("/store/stocks",
                                       params={"take": 20, "skip": 40, "name": "nut"})


def test_stocks_keep_missing_prices_as_none():
    client = client_returning([{"id": 1, "item_id": 5, "buy_price": "100.00",
                                "stock_price": None, "retail_price": ""}])
    stock = StocksRepo(client).list_by_outlet(2)[0]
    client.get.assert_called_once_with("/store/stocks/outlet/2")
    assert stock.buy_price == 100.0
    assert stock.stock_price is None
    assert stock.retail_price is None


def test_stocks_zero_price_is_not_missing():
    client = client_returning([{"id": 1, "item_id": 5, "stock_price": 0}])
    assert StocksRepo(client).list_by_outlet(1)[0].stock_price == 0.0


# ---------- invoices ----------

def test_invoices_list_all_and_recall_payload():
    client = client_returning({"data": [{
        "id": 12, "customer_id": 3, "status": "Paid", "total_amount": "250.5",
        "paid_amount": "250.5", "created_at": "2024-01-05T10:00:00Z",
        "customer": {"first_name": "Ann", "last_name": "Lee"},
        "created_user": {"first_name": "Cash", "last_name": "Ier", "username": "c1"},
    }]})
    invoices = InvoicesRepo(client).list_all()
    client.get.assert_called_once_with("/pos/invoices")

    inv = invoices[0]
    assert inv.label == "INV12"
    assert inv.party_name == "Ann Lee"

    recalled = RecalledInvoice.from_invoice(inv)
    assert recalled.id == 12
    assert recalled.label == "INV12"
    assert recalled.customer_name == "Ann Lee"
    assert recalled.total_amount == 250.5


def test_invoice_party_name_falls_back_to_creator_then_dash():
    client = client_returning([
        {"id": 1, "created_user": {"first_name": "Cash", "last_name": "Ier"}},
        {"id": 2, "customer": "not an object"},
    ])
    a, b = InvoicesRepo(client).list_all()
    assert a.party_name == "Cash Ier"
    assert b.customer is None
    assert b.party_name == "-"
