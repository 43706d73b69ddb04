# Importing the modules registers every table on Base.metadata
from app.models.clients import Client
from app.models.employees import Employee, EmployeeRole
from app.models.inventory import Inventory
from app.models.products import Product
from app.models.purchases import Purchase
from app.models.sale_items import SaleItem
from app.models.sales import Sale, SaleStatus

__all__ = [
    "Client",
    "Employee",
    "EmployeeRole",
    "Inventory",
    "Product",
    "Purchase",
    "Sale",
    "SaleItem",
    "SaleStatus",
]
