from models import Product

from .base import Repository


class ProductRepository(Repository):
    model = Product
