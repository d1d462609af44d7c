from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import (
    create_access_token,
    set_access_cookies,
    unset_jwt_cookies,
    get_jwt,
)
from flavor_fusion import jwt

auth_bp = Blueprint('auth', __name__)

# Claims flask_jwt_extended manages itself; never taken from the request body
RESERVED_CLAIMS = ('sub', 'exp', 'iat', 'nbf', 'jti', 'aud', 'iss', 'type', 'fresh', 'csrf')


@jwt.unauthorized_loader
def missing_token(reason):
    current_app.logger.info(f"Rejected request without session cookie: {reason}")
    return jsonify({'auth': False, 'message': 'Not authorized'}), 401


@jwt.invalid_token_loader
def invalid_token(reason):
    current_app.logger.info(f"Rejected request with invalid token: {reason}")
    return jsonify({'message': 'Unauthorized'}), 401


@jwt.expired_token_loader
def expired_token(jwt_header, jwt_payload):
    current_app.logger.info("Rejected request with expired token")
    return jsonify({'message': 'Unauthorized'}), 401


def email_matches_token(email):
    """True when the queried email is the one the session was issued for"""
    return email is not None and email == get_jwt().get('email')


def forbidden():
    return jsonify({'message': 'Unauthorized Access Forbidden'}), 401


@auth_bp.route('/api/v1/jwt', methods=['POST'])
def issue_token():
    """Sign the posted identity into the session cookie"""
    try:
        user = request.get_json()
        if not isinstance(user, dict):
            raise ValueError('Identity payload must be a JSON object')

        claims = {k: v for k, v in user.items() if k not in RESERVED_CLAIMS}
        access_token = create_access_token(
            identity=str(user.get('email', '')),
            additional_claims=claims,
        )
        current_app.logger.info(f"Issued session for {user.get('email')}")

        response = jsonify({'success': True})
        set_access_cookies(response, access_token)
        return response

    except Exception as e:
        current_app.logger.error(f"Token issue error: {e}")
        return jsonify({'error': True, 'message': str(e)})


@auth_bp.route('/api/v1/logout', methods=['POST'])
def logout():
    """Clear the session cookie"""
    try:
        user = request.get_json(silent=True) or {}
        current_app.logger.info(f"Logging out {user.get('email')}")

        response = jsonify({'success': True})
        unset_jwt_cookies(response)
        return response

    except Exception as e:
        current_app.logger.error(f"Logout error: {e}")
        return jsonify({'error': True, 'message': str(e)})
