from ...api.stocks_repo import Stock
from ...utils.helpers import fmt_date, fmt_money
from ..selection.model import EntityTableModel, dash


class StocksTableModel(EntityTableModel):
    HEADERS = [
        "Name", "Other Name", "Type", "Category", "Sub Category", "SKU",
        "Description", "Rack", "Outlet", "Origin",
        "Buying Price", "Retail Price", "Wholesale Price",
        "Quantity", "Unit", "Created At", "Status",
    ]

    def values(self, r: Stock, number: int) -> list:
        qty = "-" if r.quantity is None else f"{r.quantity:g}"
        return [
            dash(r.name),
            dash(r.other_name),
            dash(r.type_name),
            dash(r.category_name),
            dash(r.sub_category_name),
            dash(r.sku),
            dash(r.description),
            dash(r.rack),
            dash(r.outlet_name),
            dash(r.origin),
            fmt_money(r.buy_price, sentinel="-"),
            fmt_money(r.retail_price, sentinel="-"),
            fmt_money(r.stock_price, sentinel="-"),
            qty,
            dash(r.unit),
            dash(fmt_date(r.created_at)),
            dash(r.status),
        ]
