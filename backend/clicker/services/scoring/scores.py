from datetime import datetime
from typing import List, NamedTuple, Tuple

from sqlalchemy.exc import SQLAlchemyError

from clicker.errors import StorageError, ValidationError
from clicker.models import Score, User, UserAchievement
from .achievements import evaluate
from .users import resolve_or_create, validate_username

# Upper bound of the scores.clicks INTEGER column
MAX_CLICKS = 2 ** 31 - 1


class LeaderboardEntry(NamedTuple):
    username: str
    clicks: int
    game_date: datetime
    rank: int

    def to_dict(self):
        return {
            'username': self.username,
            'clicks': self.clicks,
            'game_date': self.game_date.isoformat() if self.game_date else None,
            'rank': self.rank,
        }


def validate_clicks(clicks) -> int:
    # bool is an int subclass; a JSON true is not a click count
    if isinstance(clicks, bool) or not isinstance(clicks, int):
        raise ValidationError('Clicks must be an integer')
    if clicks < 0:
        raise ValidationError('Clicks must be non-negative')
    if clicks > MAX_CLICKS:
        raise ValidationError(f'Clicks must be at most {MAX_CLICKS}')
    return clicks


def record_score(session, user_id: int, clicks: int, duration_seconds: int) -> Score:
    """Insert a score and return it with its generated id and game_date."""
    validate_clicks(clicks)
    try:
        score = Score(user_id=user_id, clicks=clicks, duration_seconds=duration_seconds)
        session.add(score)
        session.commit()
        session.refresh(score)
        return score
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageError(f'Failed to save score: {exc}') from exc


def top_scores(session, limit: int) -> List[LeaderboardEntry]:
    """Best scores first, ties going to the most recent game.

    Ranks are 1-based positions in this ordering, computed per call.
    """
    if limit <= 0:
        return []
    try:
        rows = (
            session.query(User.username, Score.clicks, Score.game_date)
            .join(User, Score.user_id == User.id)
            .order_by(Score.clicks.desc(), Score.game_date.desc(), Score.id.desc())
            .limit(limit)
            .all()
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageError(f'Database query failed: {exc}') from exc
    return [
        LeaderboardEntry(username, clicks, game_date, rank)
        for rank, (username, clicks, game_date) in enumerate(rows, start=1)
    ]


def submit_score(session, username: str, clicks: int,
                 duration_seconds: int) -> Tuple[Score, List[UserAchievement]]:
    """Full submission: resolve the user, record the score, award achievements.

    Input is validated before anything is written so a rejected request never
    creates a user. Each step commits on its own.
    """
    validate_username(username)
    validate_clicks(clicks)
    user_id = resolve_or_create(session, username)
    score = record_score(session, user_id, clicks, duration_seconds)
    earned = evaluate(session, user_id, score.id, clicks, duration_seconds)
    return score, earned
