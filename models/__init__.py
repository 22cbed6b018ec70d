# SQLAlchemy setup and registration of the inventory models
from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()  # Global database instance, bound to the app in create_app()

# Import the models so they are registered on db.metadata
from .product import Product
from .sales_order import SalesOrder
from .sales_item import SalesItem
