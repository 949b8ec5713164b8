"""Scoring domain services: users, scores, leaderboard and achievements.

Every function takes the SQLAlchemy session as its first argument so the
HTTP routes, CLI commands and tests decide which session is used. Storage
failures are rolled back and re-raised as ``StorageError``.
"""

from .users import resolve_or_create, get_by_username
from .scores import record_score, top_scores, submit_score
from .achievements import evaluate, match_tier, list_all, list_earned_by
from .catalog import DEFAULT_ACHIEVEMENTS, seed_achievements, validate_tiers
