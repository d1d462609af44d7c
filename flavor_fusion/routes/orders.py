from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import jwt_required
from flavor_fusion import store
from flavor_fusion.models.schemas import FoodOrderCreate
from flavor_fusion.routes.auth import email_matches_token, forbidden
from flavor_fusion.services.order_service import OrderService

orders_bp = Blueprint('orders', __name__)

order_service = OrderService(store)


@orders_bp.route('/api/v1/food-orders', methods=['POST'])
def place_food_order():
    """Place an order and take the units out of the item's stock"""
    try:
        order = FoodOrderCreate.model_validate(request.get_json())
        return jsonify(order_service.place_order(order))

    except Exception as e:
        current_app.logger.error(f"Place order error: {e}")
        return jsonify({'error': True, 'message': str(e)})


@orders_bp.route('/api/v1/my-ordered-foods', methods=['GET'])
@jwt_required()
def get_my_ordered_foods():
    """Orders placed by the signed-in user, e.g. ?email=admin@fusion.com"""
    try:
        email = request.args.get('email')
        if not email_matches_token(email):
            return forbidden()

        result = list(store.food_orders.find({'buyer_email': email}))
        return jsonify(result)

    except Exception as e:
        current_app.logger.error(f"My ordered foods error: {e}")
        return jsonify({'error': True, 'message': str(e)})


@orders_bp.route('/api/v1/my-ordered-foods/<id>', methods=['DELETE'])
def cancel_food_order(id):
    """Cancel an order and give its units back to the item"""
    try:
        return jsonify(order_service.cancel_order(id))

    except Exception as e:
        current_app.logger.error(f"Cancel order error: {e}")
        return jsonify({'error': True, 'message': str(e)})
