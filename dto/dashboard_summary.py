"""Dashboard totals handed to the presentation layer.

The value is computed per request by the reporting module and never stored.
Its JSON form uses the camelCase keys the dashboard client reads.
"""
from dataclasses import dataclass

_JSON_FIELDS = {
    'totalProducts': ('total_products', int),
    'lowStockCount': ('low_stock_count', int),
    'totalRevenue': ('total_revenue', float),
}


@dataclass
class DashboardSummary:
    total_products: int = 0
    low_stock_count: int = 0
    total_revenue: float = 0.0

    def to_dict(self):
        return {key: getattr(self, attr) for key, (attr, _) in _JSON_FIELDS.items()}

    @classmethod
    def from_dict(cls, data):
        """Inverse of to_dict(). All three keys are required and must not be null."""
        missing = [key for key in _JSON_FIELDS if data.get(key) is None]
        if missing:
            raise ValueError(f'DashboardSummary is missing {", ".join(missing)}')
        return cls(**{attr: cast(data[key]) for key, (attr, cast) in _JSON_FIELDS.items()})
