"""Initial schema: people, events, witnesses, places, notaries and ledgers

Revision ID: 20261019_0000_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1e5a7d9b20'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

LOOKUP_TABLES = (
    'event_categories',
    'witness_categories',
    'location_categories',
    'relationship_categories',
)


def _timestamps() -> list:
    return [
        sa.Column('created', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    """Create every table of the sacramental records schema."""
    for table in LOOKUP_TABLES:
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('name', sa.String(length=120), nullable=False),
            sa.Column('label', sa.String(length=120), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            *_timestamps(),
        )
        op.create_index(f'ix_{table}_name', table, ['name'], unique=True)

    op.create_table(
        'notaries',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_notaries_name', 'notaries', ['name'], unique=True)

    op.create_table(
        'locations',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('location_categories.id'), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_locations_name', 'locations', ['name'], unique=True)

    op.create_table(
        'ledgers',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('notary_id', sa.Integer(), sa.ForeignKey('notaries.id', ondelete='CASCADE'), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('volume', sa.String(length=64), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('notary_id', 'year', 'volume', name='uq_ledger_notary_year_volume'),
    )
    op.create_index('ix_ledgers_notary_id', 'ledgers', ['notary_id'])
    op.create_index('ix_ledgers_year', 'ledgers', ['year'])

    op.create_table(
        'events',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('event_categories.id'), nullable=False),
        sa.Column('date', sa.Date(), nullable=True),
        sa.Column('written_date', sa.String(length=64), nullable=True),
        sa.Column('location_id', sa.Integer(), sa.ForeignKey('locations.id'), nullable=True),
        sa.Column('ledger_id', sa.Integer(), sa.ForeignKey('ledgers.id'), nullable=True),
        sa.Column('note', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_events_category_id', 'events', ['category_id'])
    op.create_index('ix_events_date', 'events', ['date'])

    op.create_table(
        'people',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('first_name', sa.String(length=255), nullable=False),
        sa.Column('last_name', sa.String(length=255), nullable=True),
        sa.Column('race_id', sa.String(length=64), nullable=True),
        sa.Column('sex', sa.Enum('M', 'F', name='sex'), nullable=True),
        sa.Column('written_race', sa.String(length=255), nullable=True),
        sa.Column('status', sa.String(length=255), nullable=True),
        sa.Column('birth_status', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('native_id', sa.Integer(), sa.ForeignKey('locations.id'), nullable=True),
        sa.Column('birth_id', sa.Integer(), sa.ForeignKey('events.id', ondelete='SET NULL'), nullable=True),
        sa.Column('baptism_id', sa.Integer(), sa.ForeignKey('events.id', ondelete='SET NULL'), nullable=True),
        sa.Column('death_id', sa.Integer(), sa.ForeignKey('events.id', ondelete='SET NULL'), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_people_first_name', 'people', ['first_name'])
    op.create_index('ix_people_last_name', 'people', ['last_name'])
    op.create_index('ix_people_identity', 'people', ['first_name', 'last_name', 'race_id', 'sex'])

    op.create_table(
        'event_participants',
        sa.Column('event_id', sa.Integer(), sa.ForeignKey('events.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('person_id', sa.Integer(), sa.ForeignKey('people.id', ondelete='CASCADE'), primary_key=True),
    )

    for table, constraint in (('aliases', 'uq_alias_person_name'), ('occupations', 'uq_occupation_person_name')):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column('name', sa.String(length=255), nullable=False),
            sa.Column('person_id', sa.Integer(), sa.ForeignKey('people.id', ondelete='CASCADE'), nullable=False),
            *_timestamps(),
            sa.UniqueConstraint('person_id', 'name', name=constraint),
        )
        op.create_index(f'ix_{table}_name', table, ['name'])

    op.create_table(
        'residences',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('person_id', sa.Integer(), sa.ForeignKey('people.id', ondelete='CASCADE'), nullable=False),
        sa.Column('location_id', sa.Integer(), sa.ForeignKey('locations.id'), nullable=False),
        sa.Column('date', sa.Date(), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('person_id', 'location_id', name='uq_residence_person_location'),
    )
    op.create_index('ix_residences_person_id', 'residences', ['person_id'])

    op.create_table(
        'relationships',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('person_id', sa.Integer(), sa.ForeignKey('people.id', ondelete='CASCADE'), nullable=False),
        sa.Column('relation_id', sa.Integer(), sa.ForeignKey('people.id', ondelete='CASCADE'), nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('relationship_categories.id'), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('person_id', 'relation_id', 'category_id', name='uq_relationship'),
    )
    op.create_index('ix_relationships_person_id', 'relationships', ['person_id'])
    op.create_index('ix_relationships_relation_id', 'relationships', ['relation_id'])

    op.create_table(
        'witnesses',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('person_id', sa.Integer(), sa.ForeignKey('people.id', ondelete='CASCADE'), nullable=False),
        sa.Column('event_id', sa.Integer(), sa.ForeignKey('events.id', ondelete='CASCADE'), nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('witness_categories.id'), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint('person_id', 'event_id', 'category_id', name='uq_witness'),
    )
    op.create_index('ix_witnesses_person_id', 'witnesses', ['person_id'])
    op.create_index('ix_witnesses_event_id', 'witnesses', ['event_id'])


def downgrade() -> None:
    """Drop every table, dependents first."""
    for table in (
        'witnesses',
        'relationships',
        'residences',
        'occupations',
        'aliases',
        'event_participants',
        'people',
        'events',
        'ledgers',
        'locations',
        'notaries',
        *reversed(LOOKUP_TABLES),
    ):
        op.drop_table(table)
