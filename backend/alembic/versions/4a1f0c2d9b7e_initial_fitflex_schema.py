"""initial fitflex schema: users, catalog, templates, sessions, measurements, settings

Revision ID: 4a1f0c2d9b7e
Revises:
Create Date: 2026-10-18 10:12:31.402113

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# define the enum types once so both tables share them and downgrade can drop them
exercise_type = sa.Enum('strength', 'cardio', 'endurance', 'stretch', 'counter', name='exercise_type')
template_status = sa.Enum('active', 'archived', name='template_status')


# revision identifiers, used by Alembic.
revision: str = '4a1f0c2d9b7e'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) users
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=True),
        sa.Column('password_hash', sa.String(length=255), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    # 2) exercise catalog; NULL user_id rows are the shared defaults
    op.create_table(
        'exercises',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=True, index=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('type', exercise_type, nullable=False, index=True),
        sa.Column('goal', sa.Float(), nullable=True),
        sa.Column('goal_due_date', sa.Date(), nullable=True),
        sa.Column('is_default', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('user_id', 'name', name='uq_exercises_user_name'),
    )

    # 3) templates and their ordered exercise list
    op.create_table(
        'workout_templates',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('status', template_status, nullable=False, server_default='active'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_table(
        'template_exercises',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('template_id', sa.String(length=36), sa.ForeignKey('workout_templates.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_id', sa.String(length=36), sa.ForeignKey('exercises.id'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
    )

    # 4) sessions and their normalized records
    op.create_table(
        'workout_sessions',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('template_id', sa.String(length=36), sa.ForeignKey('workout_templates.id'), nullable=False, index=True),
        sa.Column('template_name', sa.String(length=120), nullable=False),
        sa.Column('date', sa.DateTime(timezone=True), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
    )
    op.create_table(
        'exercise_sessions',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('workout_session_id', sa.String(length=36), sa.ForeignKey('workout_sessions.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('exercise_id', sa.String(length=36), sa.ForeignKey('exercises.id'), nullable=False, index=True),
        sa.Column('exercise_name', sa.String(length=120), nullable=False),
        sa.Column('type', exercise_type, nullable=False),
        sa.Column('payload', sa.JSON(), nullable=False),
    )

    # 5) body measurements
    op.create_table(
        'body_measurements',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('date', sa.Date(), nullable=False, index=True),
        *[sa.Column(metric, sa.Float(), nullable=True)
          for metric in ('weight', 'chest', 'waist', 'hips', 'upper_arm', 'forearm', 'thigh', 'calf')],
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=True),
    )

    # 6) one settings row per user
    op.create_table(
        'user_settings',
        sa.Column('id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=36), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('dashboard_session_limit', sa.Integer(), nullable=False),
        sa.Column('dark_mode', sa.Boolean(), nullable=False),
        sa.Column('primary_color', sa.String(length=7), nullable=True),
        sa.Column('show_recent_workouts', sa.Boolean(), nullable=False),
        sa.Column('show_calendar', sa.Boolean(), nullable=False),
        sa.Column('show_stats_total_workouts', sa.Boolean(), nullable=False),
        sa.Column('show_stats_this_week', sa.Boolean(), nullable=False),
        sa.Column('show_stats_total_weight', sa.Boolean(), nullable=False),
        sa.Column('show_prs', sa.Boolean(), nullable=False),
        sa.Column('dashboard_widget_order', sa.JSON(), nullable=False),
    )


def downgrade() -> None:
    # drop child tables before their parents
    op.drop_table('user_settings')
    op.drop_table('body_measurements')
    op.drop_table('exercise_sessions')
    op.drop_table('workout_sessions')
    op.drop_table('template_exercises')
    op.drop_table('workout_templates')
    op.drop_table('exercises')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

    # finally drop enum types
    bind = op.get_bind()
    template_status.drop(bind, checkfirst=True)
    exercise_type.drop(bind, checkfirst=True)
