from flask import Blueprint, current_app, jsonify, request

from clicker import db, socketio
from clicker.errors import ValidationError
from clicker.services.scoring import submit_score, top_scores

scores = Blueprint('scores', __name__)


@scores.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    limit = int(current_app.config.get('LEADERBOARD_LIMIT', 100))
    entries = top_scores(db.session, limit)
    return jsonify([entry.to_dict() for entry in entries])


@scores.route('/scores', methods=['POST'])
def post_score():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Invalid request body')

    duration = int(current_app.config.get('GAME_DURATION_SEC', 10))
    score, earned = submit_score(db.session, data.get('username'), data.get('clicks'), duration)

    # Push to open leaderboards once everything is committed
    socketio.emit(
        'leaderboard_update',
        {'username': score.user.username, 'clicks': score.clicks, 'score_id': score.id},
        to='leaderboard',
        namespace='/ws',
    )

    return jsonify({
        'score': score.to_dict(),
        'achievements': [ua.to_dict() for ua in earned],
    }), 201
