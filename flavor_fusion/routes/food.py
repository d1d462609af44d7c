from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required
from pymongo import DESCENDING
from pymongo.errors import DuplicateKeyError
from flavor_fusion import store
from flavor_fusion.models.models import (
    to_object_id,
    insert_result,
    update_result,
    delete_result,
    TOP_FOOD_ITEMS_LIMIT,
)
from flavor_fusion.models.schemas import FoodItemCreate, FoodItemUpdate
from flavor_fusion.routes.auth import email_matches_token, forbidden
from flavor_fusion.services.query_builder import build_food_item_query

food_bp = Blueprint('food', __name__)


@food_bp.route('/api/v1/food-items', methods=['GET'])
def get_food_items():
    """List food items.

    Query params: category, search, sortField + sortOrder, page + limit.
    e.g. /api/v1/food-items?category=Salad&sortField=price&sortOrder=asc&page=1&limit=9
    """
    try:
        query = build_food_item_query(request.args)
        result = list(query.apply(store.food_items.find(query.filter)))

        # count of the whole collection, not of the filtered result
        total_data_count = store.food_items.count_documents({})

        return jsonify({'totalDataCount': total_data_count, 'result': result})

    except Exception as e:
        current_app.logger.error(f"List food items error: {e}")
        return jsonify({'error': True, 'message': str(e)})


@food_bp.route('/api/v1/top-food-items', methods=['GET'])
def get_top_food_items():
    """Best sellers by units ordered"""
    try:
        result = list(
            store.food_items.find()
            .sort('order', DESCENDING)
            .limit(TOP_FOOD_ITEMS_LIMIT)
        )
        return jsonify(result)

    except Exception as e:
        current_app.logger.error(f"Top food items error: {e}")
        return jsonify({'error': True, 'message': str(e)})


@food_bp.route('/api/v1/food-item/<id>', methods=['GET'])
@jwt_required()
def get_food_item(id):
    try:
        result = store.food_items.find_one({'_id': to_object_id(id)})
        if not result:
            return jsonify({'message': 'No data found'})
        return jsonify(result)

    except Exception as e:
        current_app.logger.error(f"Get food item error: {e}")
        return jsonify({'error': True, 'message': str(e)})


@food_bp.route('/api/v1/food-items', methods=['POST'])
def add_food_item():
    """Add a food item unless one with the same name and category exists"""
    try:
        new_food_item = FoodItemCreate.model_validate(request.get_json())

        duplicate = {
            'food_name': new_food_item.food_name,
            'food_category': new_food_item.food_category,
        }
        if store.food_items.find_one(duplicate):
            return jsonify({'message': 'Already exists'})

        try:
            result = store.food_items.insert_one(new_food_item.model_dump(exclude_none=True))
        except DuplicateKeyError:
            return jsonify({'message': 'Already exists'})

        current_app.logger.info(f"Food item {new_food_item.food_name} added by {new_food_item.added_by_email}")
        return jsonify(insert_result(result))

    except Exception as e:
        current_app.logger.error(f"Add food item error: {e}")
        return jsonify({'error': True, 'message': str(e)})


@food_bp.route('/api/v1/my-added-foods', methods=['GET'])
@jwt_required()
def get_my_added_foods():
    """Items contributed by the signed-in user, e.g. ?email=admin@fusion.com"""
    try:
        email = request.args.get('email')
        if not email_matches_token(email):
            return forbidden()

        result = list(store.food_items.find({'added_by_email': email}))
        return jsonify(result)

    except Exception as e:
        current_app.logger.error(f"My added foods error: {e}")
        return jsonify({'error': True, 'message': str(e)})


@food_bp.route('/api/v1/my-added-foods', methods=['PATCH'])
def update_my_added_food():
    try:
        update = FoodItemUpdate.model_validate(request.get_json())
        item_filter = {'_id': to_object_id(update.id)}

        if not store.food_items.find_one(item_filter):
            return jsonify({'message': 'No data found'})

        fields = update.model_dump(exclude_unset=True, exclude_none=True, exclude={'id'})
        if not fields:
            raise ValueError('No fields to update')

        result = store.food_items.update_one(item_filter, {'$set': fields})
        current_app.logger.info(f"Food item {update.id} updated: {sorted(fields)}")
        return jsonify(update_result(result))

    except Exception as e:
        current_app.logger.error(f"Update food item error: {e}")
        return jsonify({'error': True, 'message': str(e)})


@food_bp.route('/api/v1/my-added-foods/<id>', methods=['DELETE'])
def delete_my_added_food(id):
    try:
        result = store.food_items.delete_one({'_id': to_object_id(id)})
        current_app.logger.info(f"Food item {id} deleted: {result.deleted_count}")
        return jsonify(delete_result(result))

    except Exception as e:
        current_app.logger.error(f"Delete food item error: {e}")
        return jsonify({'error': True, 'message': str(e)})
