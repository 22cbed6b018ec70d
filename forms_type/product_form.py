# Form validating product payloads (create and full/partial update)
from flask_wtf import FlaskForm
from wtforms import StringField, DecimalField, IntegerField
from wtforms.validators import DataRequired, InputRequired, NumberRange, Length


class ProductForm(FlaskForm):
    name = StringField('Name', validators=[DataRequired(), Length(max=150)])  # Product name
    category = StringField('Category', validators=[DataRequired(), Length(max=100)])  # Category label
    cost_price = DecimalField('Cost Price', validators=[InputRequired(), NumberRange(min=0)])  # Purchase cost
    selling_price = DecimalField('Selling Price', validators=[InputRequired(), NumberRange(min=0)])  # Selling price
    quantity = IntegerField('Quantity', validators=[InputRequired(), NumberRange(min=0)])  # Quantity on hand

    def product_fields(self):
        """Validated values keyed by Product column name."""
        return {
            'name': self.name.data.strip(),
            'category': self.category.data.strip(),
            'cost_price': float(self.cost_price.data),
            'selling_price': float(self.selling_price.data),
            'quantity': self.quantity.data,
        }
