from flask import Blueprint, jsonify

from clicker import db
from clicker.services.scoring import list_all, list_earned_by

achievements = Blueprint('achievements', __name__)


@achievements.route('', methods=['GET'])
def get_achievements():
    return jsonify([a.to_dict() for a in list_all(db.session)])


@achievements.route('/<string:username>', methods=['GET'])
def get_user_achievements(username):
    return jsonify([ua.to_dict() for ua in list_earned_by(db.session, username)])
