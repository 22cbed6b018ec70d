from models import SalesOrder

from .base import Repository


class SalesOrderRepository(Repository):
    model = SalesOrder
