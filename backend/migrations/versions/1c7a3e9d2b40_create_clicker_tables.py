"""create users, scores, achievements and user_achievements; seed tiers

Revision ID: 1c7a3e9d2b40
Revises:
Create Date: 2026-10-19 00:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '1c7a3e9d2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('username', sa.String(length=64), nullable=False),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'scores',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('clicks', sa.Integer(), nullable=False),
        sa.Column('game_date', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('duration_seconds', sa.Integer(), nullable=False),
        sa.CheckConstraint('clicks >= 0', name='ck_scores_clicks_non_negative'),
    )
    op.create_index('ix_scores_user_id', 'scores', ['user_id'])
    op.create_index('ix_scores_game_date', 'scores', ['game_date'])

    achievements = op.create_table(
        'achievements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=64), nullable=False, unique=True),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('min_cps', sa.Float(), nullable=False),
        sa.Column('max_cps', sa.Float(), nullable=True),
        sa.Column('icon', sa.String(length=16), nullable=True),
        sa.Column('color', sa.String(length=16), nullable=True),
    )

    op.create_table(
        'user_achievements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('achievement_id', sa.Integer(), sa.ForeignKey('achievements.id'), nullable=False),
        sa.Column('score_id', sa.Integer(), sa.ForeignKey('scores.id'), nullable=False),
        sa.Column('earned_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'achievement_id', name='uq_user_achievement'),
    )
    op.create_index('ix_user_achievements_user_id', 'user_achievements', ['user_id'])

    # Frozen copy of the default ladder; later catalog edits get their own revision
    op.bulk_insert(achievements, [
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
    ])


def downgrade():
    op.drop_index('ix_user_achievements_user_id', table_name='user_achievements')
    op.drop_table('user_achievements')
    op.drop_table('achievements')
    op.drop_index('ix_scores_game_date', table_name='scores')
    op.drop_index('ix_scores_user_id', table_name='scores')
    op.drop_table('scores')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
