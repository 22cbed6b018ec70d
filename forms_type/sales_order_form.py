# Form validating a new sales order together with its line items
from flask_wtf import FlaskForm
from wtforms import Form, StringField, SelectField, IntegerField, DecimalField, FieldList, FormField
from wtforms.validators import DataRequired, InputRequired, NumberRange, Optional, Length, ValidationError

from models.sales_order import ORDER_STATUSES


class SalesItemForm(Form):
    product_id = IntegerField('Product', validators=[InputRequired()])  # Product sold
    quantity = IntegerField('Quantity', validators=[InputRequired(), NumberRange(min=1)])  # Units sold
    # Omitted unit price means "charge the product's current selling price"
    unit_price = DecimalField('Unit Price', validators=[Optional(), NumberRange(min=0)])


class SalesOrderForm(FlaskForm):
    customer = StringField('Customer', validators=[DataRequired(), Length(max=150)])
    invoice = StringField('Invoice', validators=[Optional(), Length(max=50)])
    status = SelectField('Status', choices=[(s, s) for s in ORDER_STATUSES], default='Pending')
    items = FieldList(FormField(SalesItemForm))

    def validate_items(self, field):
        if not field.entries:
            raise ValidationError('Add at least one product to the order.')
