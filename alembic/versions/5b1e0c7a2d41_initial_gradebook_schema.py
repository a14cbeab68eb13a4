"""initial gradebook schema

Revision ID: 5b1e0c7a2d41
Revises:
Create Date: 2026-10-19 09:12:44.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e0c7a2d41'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

class_level = sa.Enum('AF1', 'AF2', 'AF3', 'AF4', 'AF5', 'AF6', name='class_level')
result_kind = sa.Enum('EXERCISE', 'TEST', 'EXAM', name='result_kind')
attendance_status = sa.Enum('PRESENT', 'ABSENT', 'LATE', name='attendance_status')
progress_status = sa.Enum('COMPLETED', 'SKIPPED', name='progress_status')


def upgrade() -> None:
    op.create_table(
        'classes',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('level', class_level, nullable=False),
        sa.Column('academic_year', sa.String(), nullable=False),
    )
    op.create_index('ix_classes_level', 'classes', ['level'])

    op.create_table(
        'students',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('rim_number', sa.String(), nullable=True),
        sa.Column('parent_name', sa.String(), nullable=False),
        sa.Column('parent_phone', sa.String(), nullable=True),
        sa.Column('class_id', sa.String(36), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_students_class_id', 'students', ['class_id'])

    op.create_table(
        'student_notes',
        sa.Column('student_id', sa.String(36), sa.ForeignKey('students.id'), primary_key=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )

    op.create_table(
        'scores',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('student_id', sa.String(36), sa.ForeignKey('students.id'), nullable=False),
        sa.Column('class_id', sa.String(36), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('subject_key', sa.String(), nullable=False),
        sa.Column('kind', result_kind, nullable=False),
        sa.Column('score', sa.Float(), nullable=False),
        sa.Column('max_score', sa.Float(), nullable=False),
        sa.Column('term', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('student_id', 'subject_key', 'kind', 'term', name='uq_score_natural_key'),
    )
    op.create_index('ix_scores_student_id', 'scores', ['student_id'])
    op.create_index('ix_scores_class_id', 'scores', ['class_id'])
    op.create_index('ix_scores_kind', 'scores', ['kind'])

    op.create_table(
        'attendance',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('student_id', sa.String(36), sa.ForeignKey('students.id'), nullable=False),
        sa.Column('class_id', sa.String(36), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('status', attendance_status, nullable=False),
        sa.Column('justification', sa.String(), nullable=True),
        sa.UniqueConstraint('student_id', 'date', name='uq_attendance_student_date'),
    )
    op.create_index('ix_attendance_class_id', 'attendance', ['class_id'])

    op.create_table(
        'curriculum_topics',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('level', class_level, nullable=False),
        sa.Column('subject', sa.String(), nullable=False),
        sa.Column('term', sa.Integer(), nullable=False),
        sa.Column('week', sa.Integer(), nullable=False),
        sa.Column('topic', sa.Text(), nullable=False),
        sa.Column('competency', sa.Text(), nullable=True),
    )
    op.create_index('ix_curriculum_topics_level', 'curriculum_topics', ['level'])
    op.create_index('ix_curriculum_topics_subject', 'curriculum_topics', ['subject'])

    op.create_table(
        'class_progress',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('class_id', sa.String(36), sa.ForeignKey('classes.id'), nullable=False),
        sa.Column('topic_id', sa.String(), sa.ForeignKey('curriculum_topics.id'), nullable=False),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('class_id', 'topic_id', name='uq_class_progress'),
    )
    op.create_index('ix_class_progress_class_id', 'class_progress', ['class_id'])
    op.create_index('ix_class_progress_topic_id', 'class_progress', ['topic_id'])

    op.create_table(
        'student_progress',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('student_id', sa.String(36), sa.ForeignKey('students.id'), nullable=False),
        sa.Column('topic_id', sa.String(), sa.ForeignKey('curriculum_topics.id'), nullable=False),
        sa.Column('status', progress_status, nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.UniqueConstraint('student_id', 'topic_id', name='uq_student_progress'),
    )
    op.create_index('ix_student_progress_student_id', 'student_progress', ['student_id'])
    op.create_index('ix_student_progress_topic_id', 'student_progress', ['topic_id'])


def downgrade() -> None:
    op.drop_table('student_progress')
    op.drop_table('class_progress')
    op.drop_table('curriculum_topics')
    op.drop_table('attendance')
    op.drop_table('scores')
    op.drop_table('student_notes')
    op.drop_table('students')
    op.drop_table('classes')
