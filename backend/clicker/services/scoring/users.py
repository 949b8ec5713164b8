from sqlalchemy.exc import SQLAlchemyError

from clicker.errors import NotFoundError, StorageError, ValidationError
from clicker.models import User

USERNAME_MAX_LENGTH = User.__table__.c.username.type.length


def validate_username(username) -> str:
    if not isinstance(username, str) or not username.strip():
        raise ValidationError('Username is required')
    if len(username) > USERNAME_MAX_LENGTH:
        raise ValidationError(f'Username must be at most {USERNAME_MAX_LENGTH} characters')
    return username


def resolve_or_create(session, username: str) -> int:
    """Return the id for ``username``, creating the user on first sight.

    Two concurrent requests for the same new name are not serialized; the
    loser hits the unique constraint and gets a StorageError.
    """
    validate_username(username)
    try:
        user = session.query(User).filter_by(username=username).first()
        if user:
            return user.id
        user = User(username=username)
        session.add(user)
        session.commit()
        return user.id
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageError(f'Failed to create user: {exc}') from exc


def get_by_username(session, username: str) -> User:
    # Lookups only refuse an empty name; anything else unknown is a 404
    if not isinstance(username, str) or username == '':
        raise ValidationError('Username is required')
    try:
        user = session.query(User).filter_by(username=username).first()
    except SQLAlchemyError as exc:
        session.rollback()
        raise StorageError(f'Database query failed: {exc}') from exc
    if not user:
        raise NotFoundError('User not found')
    return user
