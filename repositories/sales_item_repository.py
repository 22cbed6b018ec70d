from models import SalesItem

from .base import Repository


class SalesItemRepository(Repository):
    model = SalesItem
