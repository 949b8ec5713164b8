from typing import List, Optional

from flask import current_app
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import joinedload

from clicker.errors import StorageError
from clicker.models import Achievement, UserAchievement
from .users import get_by_username


def match_tier(session, cps: float) -> Optional[Achievement]:
    """Return the most advanced tier whose inclusive range contains cps."""
    try:
        return (
            session.query(Achievement)
            .filter(Achievement.min_cps <= cps)
            .filter(or_(Achievement.max_cps.is_(None), Achievement.max_cps >= cps))
            .order_by(Achievement.min_cps.desc(), Achievement.id.asc())
            .first()
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageError(f'Failed to find achievement: {exc}') from exc


def evaluate(session, user_id: int, score_id: int, clicks: int,
             duration_seconds: int) -> List[UserAchievement]:
    """Award the tier matching this score's CPS, at most once per user.

    Returns the newly earned achievements (zero or one). Storage problems are
    logged and reported as "nothing earned" so the score itself stands.
    """
    if duration_seconds <= 0:
        current_app.logger.warning(
            f"[achievement-skip] user={user_id} score={score_id} invalid duration={duration_seconds}"
        )
        return []
    cps = clicks / duration_seconds

    try:
        achievement = match_tier(session, cps)
        if achievement is None:
            return []

        already = (
            session.query(UserAchievement.id)
            .filter_by(user_id=user_id, achievement_id=achievement.id)
            .first()
        )
        if already:
            return []

        session.add(UserAchievement(user_id=user_id, achievement_id=achievement.id, score_id=score_id))
        session.commit()

        awarded = (
            session.query(UserAchievement)
            .options(joinedload(UserAchievement.achievement))
            .filter_by(user_id=user_id, achievement_id=achievement.id)
            .order_by(UserAchievement.earned_at.desc())
            .first()
        )
    except (SQLAlchemyError, StorageError):
        session.rollback()
        current_app.logger.exception(
            f"[achievement-error] user={user_id} score={score_id} evaluation failed"
        )
        return []

    if awarded is None:
        return []
    current_app.logger.info(f"[achievement] user={user_id} earned {achievement.name} ({cps:.2f} CPS)")
    return [awarded]


def list_all(session) -> List[Achievement]:
    try:
        return session.query(Achievement).order_by(Achievement.min_cps.asc(), Achievement.id.asc()).all()
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageError(f'Database query failed: {exc}') from exc


def list_earned_by(session, username: str) -> List[UserAchievement]:
    """Achievements earned by ``username``, most recent first.

    Raises NotFoundError for an unknown username.
    """
    user = get_by_username(session, username)
    try:
        return (
            session.query(UserAchievement)
            .options(joinedload(UserAchievement.achievement))
            .filter_by(user_id=user.id)
            .order_by(UserAchievement.earned_at.desc(), UserAchievement.id.desc())
            .all()
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageError(f'Database query failed: {exc}') from exc
