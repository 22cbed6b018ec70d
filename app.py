import logging
import sys

import click
from flask import Flask, Blueprint, current_app, jsonify, request
from flask_cors import CORS
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from config import Config
from models import db, Product, SalesOrder, SalesItem
from repositories import ProductRepository, SalesOrderRepository, SalesItemRepository
from forms_type import ProductForm, SalesOrderForm, json_formdata, to_snake_case
from reports import build_dashboard_summary, ReportConfigurationError
from seed import seed_products

logger = logging.getLogger(__name__)

bp = Blueprint('inventory', __name__)


def configure_logging(level):
    """Root logging setup shared by the server and the CLI commands."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s [%(name)s] %(levelname)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )


def create_app(config_class=Config):
    """Build the application: config, database, schema and (optionally) demo data.

    Seeding runs here, before the app is handed to a server, so no request can
    race it. Database errors are not caught: an unreachable store aborts startup.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    configure_logging(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)
    CORS(app, resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}})
    app.register_blueprint(bp)
    app.register_error_handler(SQLAlchemyError, handle_database_error)
    app.register_error_handler(404, handle_not_found)
    register_commands(app)

    with app.app_context():
        db.create_all()
        if app.config.get('SEED_ON_STARTUP', True):
            seed_products(ProductRepository(db.session))

    return app


# Repositories are built per call around the request-scoped session
def product_repository():
    return ProductRepository(db.session)


def sales_order_repository():
    return SalesOrderRepository(db.session)


def sales_item_repository():
    return SalesItemRepository(db.session)


def handle_database_error(error):
    db.session.rollback()
    logger.exception('Database error while handling %s %s', request.method, request.path)
    return jsonify({'error': 'Database error', 'message': str(error)}), 500


def handle_not_found(error):
    return jsonify({'error': 'Not found'}), 404


def register_commands(app):
    @app.cli.command('init-db')
    def init_db_command():
        """Create any missing tables."""
        db.create_all()
        click.echo('Database tables created.')

    @app.cli.command('seed')
    def seed_command():
        """Insert the demo products if the product table is empty."""
        seeded = seed_products(product_repository())
        if seeded:
            click.echo(f'Seeded {seeded} products.')
        else:
            click.echo('Products already present. Nothing to seed.')


@bp.route('/')
def root():
    return 'Inventory backend is running'


@bp.route('/api/db-test')
def db_test():
    try:
        now = db.session.execute(text('SELECT CURRENT_TIMESTAMP')).scalar()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('Database connection check failed: %s', e)
        return jsonify({
            'status': 'error',
            'database': 'not connected',
            'message': str(e),
        }), 500
    return jsonify({'status': 'ok', 'database': 'connected', 'time': str(now)})


@bp.route('/api/setup', methods=['POST'])
def setup():
    """Create tables and seed demo data; harmless to call more than once."""
    try:
        db.create_all()
        seeded = seed_products(product_repository())
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Setup failed')
        return jsonify({'success': False, 'message': 'Setup failed', 'error': str(e)}), 500
    return jsonify({'success': True, 'message': 'Setup completed successfully', 'seeded': seeded})


# ---------------- PRODUCTS ----------------

@bp.route('/api/products', methods=['GET'])
def list_products():
    return jsonify([p.to_dict() for p in product_repository().find_all()])


@bp.route('/api/products', methods=['POST'])
def create_product():
    form = ProductForm(formdata=json_formdata(request.get_json(silent=True)))
    if not form.validate():
        return jsonify({'errors': form.errors}), 400
    product = product_repository().create(Product(**form.product_fields()))
    logger.info('Product %s created: %s', product.id, product.name)
    return jsonify(product.to_dict()), 201


@bp.route('/api/products/<int:product_id>', methods=['GET'])
def get_product(product_id):
    product = product_repository().find_by_id(product_id)
    if product is None:
        return jsonify({'error': 'Product not found'}), 404
    return jsonify(product.to_dict())


@bp.route('/api/products/<int:product_id>', methods=['PUT'])
def update_product(product_id):
    products = product_repository()
    product = products.find_by_id(product_id)
    if product is None:
        return jsonify({'error': 'Product not found'}), 404
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({'errors': {'body': ['Expected a JSON object.']}}), 400
    # Fields absent from the body keep their stored values
    merged = product.form_fields()
    merged.update((to_snake_case(key), value) for key, value in payload.items())
    merged.pop('id', None)
    form = ProductForm(formdata=json_formdata(merged))
    if not form.validate():
        return jsonify({'errors': form.errors}), 400
    products.update(product, **form.product_fields())
    return jsonify(product.to_dict())


@bp.route('/api/products/<int:product_id>', methods=['DELETE'])
def delete_product(product_id):
    products = product_repository()
    product = products.find_by_id(product_id)
    if product is None:
        return jsonify({'error': 'Product not found'}), 404
    # Sales lines keep a required reference to the product they sold
    if product.sales_items:
        return jsonify({'error': 'Product has recorded sales and cannot be deleted'}), 409
    products.delete(product)
    logger.info('Product %s deleted', product_id)
    return '', 204


# ---------------- SALES ----------------

@bp.route('/api/sales', methods=['GET'])
def list_sales():
    orders = sales_order_repository().find_all()
    return jsonify([o.to_dict() for o in reversed(orders)])  # Newest first


@bp.route('/api/sales', methods=['POST'])
def create_sale():
    form = SalesOrderForm(formdata=json_formdata(request.get_json(silent=True)))
    if not form.validate():
        return jsonify({'errors': form.errors}), 400

    products = product_repository()
    lines = []
    item_errors = {}
    for index, entry in enumerate(form.items.entries):
        product = products.find_by_id(entry.product_id.data)
        if product is None:
            item_errors[str(index)] = {'product_id': [f'Unknown product {entry.product_id.data}']}
        lines.append((product, entry))
    if item_errors:
        return jsonify({'errors': {'items': item_errors}}), 400

    order = SalesOrder(
        customer=form.customer.data.strip(),
        invoice=(form.invoice.data or '').strip() or None,
        status=form.status.data,
    )
    for product, entry in lines:
        unit_price = entry.unit_price.data
        order.items.append(SalesItem(
            product=product,
            quantity=entry.quantity.data,
            unit_price=float(unit_price) if unit_price is not None else product.selling_price,
        ))

    orders = sales_order_repository()
    orders.create(order)
    if order.invoice is None:
        orders.update(order, invoice=f'#INV-{1000 + order.id}')
    logger.info('Sales order %s created for %s (%d items, amount %.2f)',
                order.invoice, order.customer, len(order.items), order.amount)
    return jsonify(order.to_dict()), 201


@bp.route('/api/sales/<int:order_id>', methods=['GET'])
def get_sale(order_id):
    order = sales_order_repository().find_by_id(order_id)
    if order is None:
        return jsonify({'error': 'Sales order not found'}), 404
    return jsonify(order.to_dict())


@bp.route('/api/sales/<int:order_id>', methods=['DELETE'])
def delete_sale(order_id):
    if not sales_order_repository().delete_by_id(order_id):
        return jsonify({'error': 'Sales order not found'}), 404
    return '', 204


# ---------------- DASHBOARD ----------------

@bp.route('/api/dashboard')
def dashboard():
    try:
        summary = build_dashboard_summary(
            product_repository(),
            sales_item_repository(),
            current_app.config.get('LOW_STOCK_THRESHOLD'),
        )
    except ReportConfigurationError as e:
        logger.error('Dashboard unavailable: %s', e)
        return jsonify({'error': str(e)}), 503
    return jsonify(summary.to_dict())


if __name__ == '__main__':
    try:
        app = create_app()
    except SQLAlchemyError as e:
        logger.critical('Startup failed, database unavailable: %s', e)
        sys.exit(1)
    app.run(host=app.config['HOST'], port=app.config['PORT'], debug=app.config['DEBUG'])
