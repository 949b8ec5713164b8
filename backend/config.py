import os

DB_HOST = os.environ.get('DB_HOST') or 'localhost'
DB_PORT = os.environ.get('DB_PORT') or '5432'
DB_USER = os.environ.get('DB_USER') or 'postgres'
DB_PASSWORD = os.environ.get('DB_PASSWORD') or 'clicker'
DB_NAME = os.environ.get('DB_NAME') or 'clicker'


class Config:
    SERVICE_NAME = 'clicker-game-api'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or (
        f'postgresql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}?sslmode=disable'
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    PORT = int(os.environ.get('PORT') or '8081')
    # Length of one clicking session (seconds); CPS is clicks / this value
    GAME_DURATION_SEC = int(os.environ.get('GAME_DURATION_SEC', '10'))
    LEADERBOARD_LIMIT = int(os.environ.get('LEADERBOARD_LIMIT', '100'))
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS', '*')
