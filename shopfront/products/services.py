"""
Product Services

Validation and persistence for products.
"""

import logging
from decimal import Decimal, InvalidOperation
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from shopfront.database import guard_connection
from shopfront.extensions import db
from shopfront.models import Product

logger = logging.getLogger(__name__)

TRUE_VALUES = (True, 1, '1', 'true', 'on', 'yes')
FALSE_VALUES = (False, 0, '0', 'false', 'off', 'no')


def _blank(value):
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_bool(value):
    if isinstance(value, str):
        value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(value)


def validate_product(payload):
    """Check submitted product fields.
    
    Args:
        payload: Mapping of submitted fields (form or JSON)
    
    Returns:
        Tuple of (cleaned field dict, dict mapping field name to error message)
    """
    config = current_app.config
    title_max = config['PRODUCT_TITLE_MAX_LENGTH']
    sku_max = config['PRODUCT_SKU_MAX_LENGTH']
    cleaned = {}
    errors = {}
    
    # Title: required string, bounded length
    title = payload.get('title')
    if _blank(title):
        errors['title'] = 'Product title is required.'
    elif not isinstance(title, str):
        errors['title'] = 'Product title must be a string.'
    elif len(title.strip()) > title_max:
        errors['title'] = f'Product title is too long (max {title_max} characters).'
    else:
        cleaned['title'] = title.strip()
    
    # SKU: optional, bounded length, unique
    sku = payload.get('sku')
    if not _blank(sku):
        if not isinstance(sku, str):
            errors['sku'] = 'SKU must be a string.'
        elif len(sku.strip()) > sku_max:
            errors['sku'] = f'SKU must be at most {sku_max} characters.'
        else:
            sku = sku.strip()
            with guard_connection():
                taken = Product.query.filter_by(sku=sku).first()
            if taken:
                errors['sku'] = 'SKU already exists.'
            else:
                cleaned['sku'] = sku
    
    description = payload.get('description')
    if not _blank(description):
        if isinstance(description, str):
            cleaned['description'] = description.strip()
        else:
            errors['description'] = 'Product description must be a string.'
    
    # Price: required, non-negative number
    price = payload.get('price')
    if _blank(price):
        errors['price'] = 'Product price is required.'
    else:
        try:
            if isinstance(price, bool):
                raise InvalidOperation
            price = Decimal(str(price).strip())
            if not price.is_finite():
                raise InvalidOperation
        except InvalidOperation:
            errors['price'] = 'Product price must be a number.'
        else:
            if price < 0:
                errors['price'] = 'Product price cannot be negative.'
            else:
                cleaned['price'] = price
    
    # Stock: optional, non-negative integer
    stock = payload.get('stock')
    if not _blank(stock):
        if isinstance(stock, (bool, float)):
            stock = None
        else:
            try:
                stock = int(str(stock).strip())
            except ValueError:
                stock = None
        if stock is None:
            errors['stock'] = 'Product stock must be an integer.'
        elif stock < 0:
            errors['stock'] = 'Product stock cannot be negative.'
        else:
            cleaned['stock'] = stock
    
    is_active = payload.get('is_active')
    if not _blank(is_active):
        try:
            cleaned['is_active'] = _parse_bool(is_active)
        except (ValueError, TypeError):
            errors['is_active'] = 'Product active flag must be true or false.'
    
    return cleaned, errors


def create_product(title, sku=None, description=None, price=0, stock=0, is_active=True):
    """Persist a new product and return it."""
    product = Product(title=title, sku=sku, description=description,
                      price=price, stock=stock, is_active=is_active)
    with guard_connection():
        try:
            db.session.add(product)
            db.session.commit()
        except SQLAlchemyError:
            db.session.rollback()
            raise
    logger.info('Created product %s (%s)', product.id, product.title)
    return product


def find_product(product_id):
    """Return the product with ``product_id`` or None."""
    with guard_connection():
        return db.session.get(Product, product_id)
