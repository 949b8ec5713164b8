import os
import sys
import pytest

# Ensure the backend root (containing the `clicker` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from clicker import create_app, db, socketio
from config import Config


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    GAME_DURATION_SEC = 10
    LEADERBOARD_LIMIT = 100
    CORS_ORIGINS = '*'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import clicker.models  # noqa: F401
        from clicker.services.scoring import seed_achievements
        db.create_all()
        seed_achievements(db.session)
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def session(flask_app):
    return db.session


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def novice_pro_catalog(session):
    """Replace the default ladder with a two-tier Novice/Pro catalog."""
    from clicker.models import Achievement
    from clicker.services.scoring import seed_achievements
    session.query(Achievement).delete()
    session.commit()
    seed_achievements(session, [
        {'name': 'Novice', 'description': 'Getting started', 'min_cps': 0, 'max_cps': 5},
        {'name': 'Pro', 'description': 'Fast fingers', 'min_cps': 5, 'max_cps': None},
    ])
    return session


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
