# Store access: one thin repository per persisted model
from .base import Repository
from .product_repository import ProductRepository
from .sales_order_repository import SalesOrderRepository
from .sales_item_repository import SalesItemRepository
