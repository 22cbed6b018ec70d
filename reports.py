# Dashboard aggregation over the product and sales stores
from dto import DashboardSummary


class ReportConfigurationError(RuntimeError):
    """Raised when a report needs a setting that was not configured."""


# A product is low on stock when its quantity is strictly below the threshold.
# Products with no recorded quantity count as zero.
def is_low_stock(product, threshold):
    return (product.quantity or 0) < threshold


def count_low_stock(products, threshold):
    return sum(1 for p in products if is_low_stock(p, threshold))


# Revenue realised by recorded sales: quantity x unit price over every line item.
def calculate_total_revenue(sales_items):
    return float(sum(item.line_total for item in sales_items))


def build_dashboard_summary(product_repository, sales_item_repository, low_stock_threshold):
    """Assemble the dashboard totals from the stores.

    low_stock_threshold comes from configuration (LOW_STOCK_THRESHOLD); there
    is no built-in default, so a missing value is an error.
    """
    if low_stock_threshold is None:
        raise ReportConfigurationError('LOW_STOCK_THRESHOLD is not configured')

    products = product_repository.find_all()
    return DashboardSummary(
        total_products=len(products),
        low_stock_count=count_low_stock(products, low_stock_threshold),
        total_revenue=calculate_total_revenue(sales_item_repository.find_all()),
    )
