# Request forms for the JSON API
from .formdata import json_formdata, to_snake_case
from .product_form import ProductForm
from .sales_order_form import SalesOrderForm, SalesItemForm
