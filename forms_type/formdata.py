"""Turn a JSON request body into form data WTForms can validate.

WTForms validates text input, so scalar values are stringified (a numeric 0
must still satisfy InputRequired). camelCase keys become snake_case field
names, and lists of objects are flattened into FieldList entry names
("items-0-product_id").
"""
import re

from werkzeug.datastructures import MultiDict

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


def to_snake_case(key):
    return _CAMEL_BOUNDARY.sub('_', key).lower()


def _flatten(prefix, value, out):
    if isinstance(value, dict):
        for key, inner in value.items():
            name = to_snake_case(key)
            _flatten(f'{prefix}-{name}' if prefix else name, inner, out)
    elif isinstance(value, (list, tuple)):
        for index, inner in enumerate(value):
            _flatten(f'{prefix}-{index}', inner, out)
    elif value is None:
        return
    elif isinstance(value, bool):
        out.append((prefix, 'y' if value else ''))
    else:
        out.append((prefix, str(value)))


def json_formdata(payload):
    pairs = []
    if isinstance(payload, dict):
        _flatten('', payload, pairs)
    return MultiDict(pairs)
