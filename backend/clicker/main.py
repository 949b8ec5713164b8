from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


@main.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'healthy', 'service': current_app.config.get('SERVICE_NAME', 'clicker-game-api')})
