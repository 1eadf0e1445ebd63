"""
Product Routes
"""

from flask import render_template, request, jsonify, current_app
from flask_login import login_required
from shopfront.products import products_bp
from shopfront.products.services import validate_product, create_product, find_product


@products_bp.route('/products/create')
@login_required
def create():
    """Product creation form"""
    return render_template('products/create.html',
                           title='Create Product',
                           title_max_length=current_app.config['PRODUCT_TITLE_MAX_LENGTH'],
                           sku_max_length=current_app.config['PRODUCT_SKU_MAX_LENGTH'])


@products_bp.route('/products', methods=['POST'])
@login_required
def store():
    """Create a product from form or JSON input"""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = request.form
    
    fields, errors = validate_product(payload)
    if errors:
        return jsonify({'message': 'The given data was invalid.', 'errors': errors}), 422
    
    product = create_product(**fields)
    return jsonify({'message': 'created', 'data': {'id': product.id, 'title': product.title}}), 201


@products_bp.route('/products/<int:product_id>')
def show(product_id):
    """Product detail as JSON"""
    product = find_product(product_id)
    if product is None:
        return jsonify({'message': 'Product not found'}), 404
    return jsonify(product.to_dict())
