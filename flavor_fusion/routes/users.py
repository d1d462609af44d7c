from flask import Blueprint, request, jsonify, current_app
from pymongo.errors import DuplicateKeyError
from flavor_fusion import store
from flavor_fusion.models.models import insert_result

users_bp = Blueprint('users', __name__)


@users_bp.route('/api/v1/users', methods=['POST'])
def add_user():
    """Save a signed-up user unless the name/email pair is already stored"""
    try:
        user = request.get_json()

        if store.users.find_one({'name': user.get('name'), 'email': user.get('email')}):
            return jsonify({'message': 'Already exists'})

        try:
            result = store.users.insert_one(user)
        except DuplicateKeyError:
            return jsonify({'message': 'Already exists'})

        current_app.logger.info(f"User {user.get('email')} added")
        return jsonify(insert_result(result))

    except Exception as e:
        current_app.logger.error(f"Add user error: {e}")
        return jsonify({'error': True, 'message': str(e)})
