"""Demo data for a fresh database.

seed_products() inserts the demo catalogue only when the product table is
empty, so it is safe to call on every startup.
"""
import logging

from models import Product

logger = logging.getLogger(__name__)

# (name, category, cost price, selling price, quantity)
SEED_PRODUCTS = [
    ('Dell Inspiron Laptop', 'Electronics', 48000.0, 55000.0, 8),
    ('Samsung Galaxy A55', 'Mobile', 25000.0, 28999.0, 15),
    ('Office Chair (Ergonomic)', 'Furniture', 3000.0, 4200.0, 12),
    ('HP Laser Printer', 'Electronics', 9000.0, 11500.0, 5),
]


def seed_products(product_repository):
    """Insert SEED_PRODUCTS if the store holds no products; return how many were written."""
    existing = product_repository.count()
    if existing != 0:
        logger.info('Product store already has %d record(s). Skipping seed.', existing)
        return 0

    for name, category, cost_price, selling_price, quantity in SEED_PRODUCTS:
        product_repository.save(Product(
            name=name,
            category=category,
            cost_price=cost_price,
            selling_price=selling_price,
            quantity=quantity,
        ))

    logger.info('Seeded %d products.', len(SEED_PRODUCTS))
    return len(SEED_PRODUCTS)
