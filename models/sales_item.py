# SalesItem model: one product line of a SalesOrder
from . import db


class SalesItem(db.Model):
    __tablename__ = 'sales_item'
    id = db.Column(db.Integer, primary_key=True)
    order_id = db.Column(db.Integer, db.ForeignKey('sales_order.id'), nullable=False)  # Owning order
    product_id = db.Column(db.Integer, db.ForeignKey('product.id'), nullable=False)  # Product sold
    quantity = db.Column(db.Integer, nullable=False)  # Units sold
    unit_price = db.Column(db.Float, nullable=False)  # Price charged per unit
    product = db.relationship('Product', backref='sales_items')

    @property
    def line_total(self):
        return (self.quantity or 0) * (self.unit_price or 0.0)

    def to_dict(self):
        return {
            'id': self.id,
            'orderId': self.order_id,
            'productId': self.product_id,
            'productName': self.product.name if self.product else None,
            'quantity': self.quantity,
            'unitPrice': self.unit_price,
            'lineTotal': self.line_total,
        }

    def __repr__(self):
        return f'<SalesItem order={self.order_id} product={self.product_id} qty={self.quantity}>'
