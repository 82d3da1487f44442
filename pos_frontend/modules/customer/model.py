from ...api.customers_repo import Customer
from ..selection.model import EntityTableModel, dash


class CustomersTableModel(EntityTableModel):
    HEADERS = ["#", "Name", "Address", "Telephone", "Description"]

    def values(self, r: Customer, number: int) -> list:
        return [
            number,
            dash(r.display_name),
            dash(r.address),
            dash(r.telephone),
            dash(r.description),
        ]
