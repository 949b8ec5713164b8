from typing import Iterable, List, Mapping

from sqlalchemy.exc import SQLAlchemyError

from clicker.errors import StorageError, ValidationError
from clicker.models import Achievement

# Tiers for a 10 second session. Adjacent tiers share their boundary; the
# evaluator resolves a boundary value to the higher tier.
DEFAULT_ACHIEVEMENTS = [
    {'name': 'Sleepy Fingers', 'description': 'Finish a session under 2 clicks per second',
     'min_cps': 0.0, 'max_cps': 2.0, 'icon': '🐢', 'color': '#95A5A6'},
    {'name': 'Warming Up', 'description': 'Reach 2 clicks per second',
     'min_cps': 2.0, 'max_cps': 4.0, 'icon': '👆', 'color': '#3498DB'},
    {'name': 'Quick Tapper', 'description': 'Reach 4 clicks per second',
     'min_cps': 4.0, 'max_cps': 6.0, 'icon': '⚡', 'color': '#2ECC71'},
    {'name': 'Speed Demon', 'description': 'Reach 6 clicks per second',
     'min_cps': 6.0, 'max_cps': 8.0, 'icon': '🔥', 'color': '#E67E22'},
    {'name': 'Click Master', 'description': 'Reach 8 clicks per second',
     'min_cps': 8.0, 'max_cps': 10.0, 'icon': '🏆', 'color': '#9B59B6'},
    {'name': 'Legendary', 'description': 'Reach 10 or more clicks per second',
     'min_cps': 10.0, 'max_cps': None, 'icon': '👑', 'color': '#FFD700'},
]


def validate_tiers(tiers: Iterable[Mapping]) -> List[Mapping]:
    """Check that tiers form one contiguous ladder and return them sorted.

    Each tier must start where the previous one ends, and only the last tier
    may be unbounded.
    """
    ordered = sorted(tiers, key=lambda t: t['min_cps'])
    names = set()
    previous = None
    for tier in ordered:
        name = tier['name']
        if name in names:
            raise ValidationError(f'Duplicate achievement name: {name}')
        names.add(name)
        if tier['min_cps'] < 0:
            raise ValidationError(f'{name}: min_cps must be non-negative')
        max_cps = tier.get('max_cps')
        if max_cps is not None and max_cps < tier['min_cps']:
            raise ValidationError(f'{name}: max_cps is below min_cps')
        if previous is not None:
            if previous.get('max_cps') is None:
                raise ValidationError(f"{previous['name']}: only the last tier may be unbounded")
            if tier['min_cps'] < previous['max_cps']:
                raise ValidationError(f"{name} overlaps {previous['name']}")
            if tier['min_cps'] > previous['max_cps']:
                raise ValidationError(f"Gap between {previous['name']} and {name}")
        previous = tier
    return ordered


def seed_achievements(session, tiers=DEFAULT_ACHIEVEMENTS) -> int:
    """Insert the tiers that are not in the catalog yet; returns how many."""
    ordered = validate_tiers(tiers)
    try:
        existing = {name for (name,) in session.query(Achievement.name).all()}
        added = 0
        for tier in ordered:
            if tier['name'] in existing:
                continue
            session.add(Achievement(
                name=tier['name'],
                description=tier.get('description', ''),
                min_cps=tier['min_cps'],
                max_cps=tier.get('max_cps'),
                icon=tier.get('icon'),
                color=tier.get('color'),
            ))
            added += 1
        session.commit()
        return added
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageError(f'Failed to seed achievements: {exc}') from exc
