"""SalesOrder model: header of a sale (invoice) grouping its line items.

The order amount is not stored; it is derived from the line items so that
the header can never disagree with its lines.
"""
from datetime import datetime

from . import db

ORDER_STATUSES = ('Paid', 'Pending')


class SalesOrder(db.Model):
    __tablename__ = 'sales_order'
    id = db.Column(db.Integer, primary_key=True)
    invoice = db.Column(db.String(50), nullable=True)  # Invoice label, e.g. '#INV-1019'
    customer = db.Column(db.String(150), nullable=False)  # Customer name
    status = db.Column(db.String(20), default='Pending', nullable=False)  # 'Paid' or 'Pending'
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    items = db.relationship(
        'SalesItem',
        backref='order',
        cascade='all, delete-orphan',
        order_by='SalesItem.id',
    )

    @property
    def amount(self):
        return sum(item.line_total for item in self.items)

    def to_dict(self):
        return {
            'id': self.id,
            'invoice': self.invoice,
            'customer': self.customer,
            'status': self.status,
            'amount': self.amount,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'items': [item.to_dict() for item in self.items],
        }

    def __repr__(self):
        return f'<SalesOrder {self.invoice or self.id} {self.customer}>'
