"""
Ad Block Routes
"""

from flask import request, jsonify, abort

from hertz_admin.ads import ads_bp
from hertz_admin.admin.decorators import admin_required
from hertz_admin.storage import storage
from hertz_admin.utils import json_payload, parse_bool, require_strings

REQUIRED_FIELDS = ('name', 'content', 'position')


@ads_bp.route('', methods=['GET'])
def list_ad_blocks():
    """Ad blocks, optionally filtered by ?active=. Public so the site can render them."""
    try:
        active = parse_bool(request.args.get('active'))
    except ValueError:
        abort(400, description='Query parameter "active" must be true or false.')
    return jsonify([b.to_dict() for b in storage.get_ad_blocks(active)])


@ads_bp.route('', methods=['POST'])
@admin_required
def create_ad_block():
    data = json_payload()
    require_strings(data, REQUIRED_FIELDS)
    missing = [f for f in REQUIRED_FIELDS if not data.get(f)]
    if missing:
        return jsonify({'message': 'Missing required fields', 'fields': missing}), 400
    if 'active' in data and not isinstance(data['active'], bool):
        abort(400, description='"active" must be a boolean.')

    return jsonify(storage.create_ad_block(data).to_dict()), 201


@ads_bp.route('/<ad_block_id>', methods=['PATCH', 'PUT'])
@admin_required
def update_ad_block(ad_block_id):
    data = json_payload()
    require_strings(data, REQUIRED_FIELDS)
    if 'active' in data and not isinstance(data['active'], bool):
        abort(400, description='"active" must be a boolean.')

    ad_block = storage.update_ad_block(ad_block_id, data)
    if ad_block is None:
        abort(404, description='Ad block not found.')
    return jsonify(ad_block.to_dict())


@ads_bp.route('/<ad_block_id>', methods=['DELETE'])
@admin_required
def delete_ad_block(ad_block_id):
    storage.delete_ad_block(ad_block_id)
    return '', 204
