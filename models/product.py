# Product model: an item held in stock
from . import db


class Product(db.Model):
    __tablename__ = 'product'  # Table name in the database
    id = db.Column(db.Integer, primary_key=True)  # Identity assigned on insert
    name = db.Column(db.String(150), nullable=False)  # Product name
    category = db.Column(db.String(100), nullable=False)  # Free-text category label
    cost_price = db.Column(db.Float, nullable=False)  # Purchase cost per unit
    selling_price = db.Column(db.Float, nullable=False)  # Selling price per unit
    quantity = db.Column(db.Integer, default=0)  # Quantity on hand

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'costPrice': self.cost_price,
            'sellingPrice': self.selling_price,
            'quantity': self.quantity,
        }

    def form_fields(self):
        """Stored values keyed by column name, as ProductForm expects them."""
        return {
            'name': self.name,
            'category': self.category,
            'cost_price': self.cost_price,
            'selling_price': self.selling_price,
            'quantity': self.quantity,
        }

    def __repr__(self):
        return f'<Product {self.name}>'
