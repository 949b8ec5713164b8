from clicker import db
from datetime import datetime, timezone


def _utcnow():
    return datetime.now(timezone.utc)


def _iso(value):
    return value.isoformat() if value else None


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    scores = db.relationship('Score', back_populates='user', lazy='dynamic')


class Score(db.Model):
    __tablename__ = 'scores'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    clicks = db.Column(db.Integer, nullable=False)
    game_date = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    duration_seconds = db.Column(db.Integer, nullable=False)
    user = db.relationship('User', back_populates='scores')

    __table_args__ = (
        db.CheckConstraint('clicks >= 0', name='ck_scores_clicks_non_negative'),
    )

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'username': self.user.username if self.user else None,
            'clicks': self.clicks,
            'game_date': _iso(self.game_date),
            'duration_seconds': self.duration_seconds,
        }


class Achievement(db.Model):
    __tablename__ = 'achievements'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), unique=True, nullable=False)
    description = db.Column(db.Text, nullable=False, default='')
    min_cps = db.Column(db.Float, nullable=False)
    max_cps = db.Column(db.Float, nullable=True)  # NULL: no upper bound
    icon = db.Column(db.String(16), nullable=True)
    color = db.Column(db.String(16), nullable=True)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'min_cps': self.min_cps,
            'max_cps': self.max_cps,
            'icon': self.icon,
            'color': self.color,
        }


class UserAchievement(db.Model):
    __tablename__ = 'user_achievements'
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    achievement_id = db.Column(db.Integer, db.ForeignKey('achievements.id'), nullable=False)
    score_id = db.Column(db.Integer, db.ForeignKey('scores.id'), nullable=False)
    earned_at = db.Column(db.DateTime(timezone=True), nullable=False, default=_utcnow)

    achievement = db.relationship('Achievement')
    score = db.relationship('Score')

    __table_args__ = (
        db.UniqueConstraint('user_id', 'achievement_id', name='uq_user_achievement'),
    )

    def to_dict(self):
        achievement = self.achievement
        return {
            'achievement_id': self.achievement_id,
            'name': achievement.name,
            'description': achievement.description,
            'icon': achievement.icon,
            'color': achievement.color,
            'score_id': self.score_id,
            'earned_at': _iso(self.earned_at),
        }
