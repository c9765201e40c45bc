# (c) Copyright Datacraft, 2026
"""Initial field-camp schema: projects, people, checklists, children,
transport, markets, inventory, purchases and requests.

Revision ID: fc_0001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from geoalchemy2 import Geography

# revision identifiers, used by Alembic.
revision: str = 'fc_0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _point():
	return Geography(geometry_type='POINT', srid=4326, spatial_index=False)


def _tz():
	return sa.DateTime(timezone=True)


def upgrade() -> None:
	op.execute("CREATE EXTENSION IF NOT EXISTS postgis")

	# Lookup / taxonomy tables
	op.create_table(
		'checklist_area',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('name', sa.String, nullable=False),
		sa.Column('description', sa.String),
	)

	op.create_table(
		'vehicules_type',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('type', sa.String, nullable=False),
	)
	op.create_index('idx_vehicules_type', 'vehicules_type', ['type'])

	op.create_table(
		'pse_odoo_products',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('code', sa.String, nullable=False),
		sa.Column('product_name', sa.String, nullable=False),
		sa.Column('description', sa.String),
		sa.UniqueConstraint('code', name='pse_odoo_products_code_key'),
	)
	op.create_index('idx_odoo_product_code', 'pse_odoo_products', ['code'])

	op.create_table(
		'camp_product_types',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('name', sa.String, nullable=False),
		sa.Column('description', sa.String),
	)

	op.create_table(
		'product_storage_types',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('type', sa.String, nullable=False),
	)

	op.create_table(
		'unit_format',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('format', sa.String, nullable=False),
	)

	op.create_table(
		'purchase_group',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('name', sa.String, nullable=False),
	)

	op.create_table(
		'purchase_drop_off_locations',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('name', sa.String, nullable=False),
		sa.Column('location', sa.String, nullable=False),
	)

	op.create_table(
		'request_types',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('name', sa.String, nullable=False),
	)

	# Teams and roles
	op.create_table(
		'teams',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('code', sa.String(6), nullable=False),
		sa.Column('name', sa.String, nullable=False),
		sa.Column('description', sa.String),
		sa.UniqueConstraint('code', name='teams_code_key'),
	)
	op.create_index('idx_team_name', 'teams', ['name'])

	op.create_table(
		'roles',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('team_id', sa.Integer, sa.ForeignKey('teams.id', ondelete='CASCADE', name='roles_team_id_fkey')),
		sa.Column('name', sa.String, nullable=False),
		sa.Column('description', sa.String),
	)
	op.create_index('idx_role_name', 'roles', ['name'])
	op.create_index('idx_roles_team_id', 'roles', ['team_id'])

	# Projects
	op.create_table(
		'projects',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('project_code', sa.String(3), nullable=False),
		sa.Column('project_name', sa.String, nullable=False),
		sa.Column('project_description', sa.String),
		sa.Column('project_location', _point()),
		sa.Column('beneficiaries_ages', sa.String),
		sa.Column('budget', sa.Float),
		sa.Column('actual_money_spent', sa.Float),
		sa.UniqueConstraint('project_code', name='projects_project_code_key'),
		sa.CheckConstraint('char_length(project_code) = 3', name='projects_project_code_check'),
	)
	op.create_index('idx_project_code', 'projects', ['project_code'])
	op.create_index('idx_project_location', 'projects', ['project_location'], postgresql_using='gist')

	# Transport
	op.create_table(
		'transport_locations',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('code', sa.String, nullable=False),
		sa.Column('name', sa.String, nullable=False),
		sa.Column('location', _point()),
		sa.Column('description', sa.String),
		sa.UniqueConstraint('code', name='transport_locations_code_key'),
	)
	op.create_index('idx_transport_location_code', 'transport_locations', ['code'])
	op.create_index('idx_transport_location_name', 'transport_locations', ['name'])
	op.create_index('idx_transport_location_geog', 'transport_locations', ['location'], postgresql_using='gist')

	op.create_table(
		'available_vehicules',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('code', sa.String, nullable=False),
		sa.Column('type_id', sa.Integer, sa.ForeignKey('vehicules_type.id', ondelete='CASCADE', name='available_vehicules_type_id_fkey')),
		sa.Column('available_seats', sa.Integer, nullable=False),
		sa.Column('image_path', sa.String),
		sa.UniqueConstraint('code', name='available_vehicules_code_key'),
	)
	op.create_index('idx_vehicule_code', 'available_vehicules', ['code'])
	op.create_index('idx_available_vehicules_type_id', 'available_vehicules', ['type_id'])

	# Markets
	op.create_table(
		'markets',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('name', sa.String, nullable=False),
		sa.Column('opening_hours', sa.String),
		sa.Column('phone', sa.String),
		sa.Column('website', sa.String),
		sa.Column('address', sa.String),
		sa.Column('location', _point()),
		sa.Column('google_maps_link', sa.String),
		sa.Column('comments', sa.String),
	)
	op.create_index('idx_market_name', 'markets', ['name'])
	op.create_index('idx_market_location_geog', 'markets', ['location'], postgresql_using='gist')

	# Camp people
	op.create_table(
		'camp_people',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('role_id', sa.Integer, sa.ForeignKey('roles.id', ondelete='CASCADE', name='camp_people_role_id_fkey')),
		sa.Column('project_id', sa.Integer, sa.ForeignKey('projects.id', ondelete='CASCADE', name='camp_people_project_id_fkey')),
		sa.Column('name', sa.String, nullable=False),
		sa.Column('surname', sa.String, nullable=False),
		sa.Column('international_phone_number', sa.String),
		sa.Column('kh_phone_number', sa.String),
		sa.Column('email', sa.String),
		sa.Column('gender', sa.String(1)),
		sa.Column('age', sa.Integer),
		sa.Column('nationality', sa.String),
		sa.Column('passport', sa.String),
		sa.Column('photo_path', sa.String),
		sa.CheckConstraint("gender IN ('M', 'F')", name='camp_people_gender_check'),
	)
	op.create_index('idx_camp_people_name', 'camp_people', ['name', 'surname'])
	op.create_index('idx_camp_people_email', 'camp_people', ['email'])
	op.create_index('idx_camp_people_role_id', 'camp_people', ['role_id'])
	op.create_index('idx_camp_people_project_id', 'camp_people', ['project_id'])

	op.create_table(
		'camp_people_extra_data',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('camp_people_id', sa.Integer, sa.ForeignKey('camp_people.id', ondelete='CASCADE', name='camp_people_extra_data_camp_people_id_fkey')),
		sa.Column('arrival_flight_number', sa.String),
		sa.Column('arrival_date_time', _tz()),
		sa.Column('departure_flight_number', sa.String),
		sa.Column('departure_date_time', _tz()),
		sa.Column('flight_tickets', sa.Boolean),
		sa.Column('travel_insurance', sa.Boolean),
		sa.Column('vaccination_card', sa.Boolean),
		sa.Column('passport_fotocopy', sa.String),
		sa.Column('cambodia_evisa', sa.Boolean),
		sa.Column('passport_photo', sa.String),
		sa.Column('certificate_sexual_offences', sa.Boolean),
		sa.Column('proof_of_payment', sa.Boolean),
		sa.Column('programme_rules', sa.Boolean),
		sa.Column('volunteer_contract', sa.Boolean),
	)

	# Checklists
	op.create_table(
		'checklist_tasks',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('name', sa.String, nullable=False),
		sa.Column('short_description', sa.String),
		sa.Column('project_id', sa.Integer, sa.ForeignKey('projects.id', ondelete='CASCADE', name='checklist_tasks_project_id_fkey')),
		sa.Column('team_id', sa.Integer, sa.ForeignKey('teams.id', ondelete='CASCADE', name='checklist_tasks_team_id_fkey')),
		sa.Column('area_id', sa.Integer, sa.ForeignKey('checklist_area.id', ondelete='CASCADE', name='checklist_tasks_area_id_fkey')),
		sa.Column('priority', sa.Integer),
		sa.Column('done', sa.Boolean, server_default=sa.false()),
		sa.Column('due_date', _tz()),
	)
	op.create_index('idx_checklist_tasks_name', 'checklist_tasks', ['name'])
	op.create_index('idx_checklist_tasks_project_id', 'checklist_tasks', ['project_id'])
	op.create_index('idx_checklist_tasks_team_id', 'checklist_tasks', ['team_id'])
	op.create_index('idx_checklist_tasks_area_id', 'checklist_tasks', ['area_id'])
	op.create_index('idx_checklist_tasks_due_date', 'checklist_tasks', ['due_date'])

	# Children
	op.create_table(
		'children',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('name', sa.String, nullable=False),
		sa.Column('surname', sa.String, nullable=False),
		sa.Column('age', sa.Integer, nullable=False),
		sa.Column('gender', sa.String(1)),
		sa.Column('project_id', sa.Integer, sa.ForeignKey('projects.id', ondelete='CASCADE', name='children_project_id_fkey')),
		sa.CheckConstraint("gender IN ('M', 'F')", name='children_gender_check'),
	)
	op.create_index('idx_children_project_id', 'children', ['project_id'])

	# Camp products
	op.create_table(
		'camp_products',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('product_name', sa.String, nullable=False),
		sa.Column('project_id', sa.Integer, sa.ForeignKey('projects.id', ondelete='CASCADE', name='camp_products_project_id_fkey')),
		sa.Column('odoo_product_id', sa.Integer, sa.ForeignKey('pse_odoo_products.id', ondelete='RESTRICT', name='camp_products_odoo_product_id_fkey')),
		sa.Column('quantity', sa.Integer),
		sa.Column('unit_format', sa.Integer, sa.ForeignKey('unit_format.id', ondelete='RESTRICT', name='camp_products_unit_format_fkey')),
		sa.Column('storage_type', sa.Integer, sa.ForeignKey('product_storage_types.id', ondelete='RESTRICT', name='camp_products_storage_type_fkey')),
		sa.Column('storage_id', sa.Integer),
		sa.Column('comments', sa.String),
	)
	op.create_index('idx_camp_products_project_id', 'camp_products', ['project_id'])
	op.create_index('idx_camp_products_odoo_product_id', 'camp_products', ['odoo_product_id'])

	# Requests
	op.create_table(
		'requests',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('priority', sa.Integer),
		sa.Column('requested_by', sa.Integer, sa.ForeignKey('camp_people.id', ondelete='SET NULL', name='requests_requested_by_fkey')),
		sa.Column('date_time_requested', _tz(), nullable=False),
		sa.Column('status', sa.String),
		sa.Column('project_id', sa.Integer, sa.ForeignKey('projects.id', ondelete='CASCADE', name='requests_project_id_fkey')),
		sa.Column('request_type', sa.Integer, sa.ForeignKey('request_types.id', ondelete='RESTRICT', name='requests_request_type_fkey')),
	)
	op.create_index('idx_requests_requested_by', 'requests', ['requested_by'])
	op.create_index('idx_requests_project_id', 'requests', ['project_id'])
	op.create_index('idx_requests_request_type', 'requests', ['request_type'])
	op.create_index('idx_requests_date_time_requested', 'requests', ['date_time_requested'])

	# Transportations
	op.create_table(
		'transportations',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('vehicule_id', sa.Integer, sa.ForeignKey('available_vehicules.id', ondelete='CASCADE', name='transportations_vehicule_id_fkey')),
		sa.Column('pax', sa.Integer, nullable=False),
		sa.Column('origin_id', sa.Integer, sa.ForeignKey('transport_locations.id', ondelete='CASCADE', name='transportations_origin_id_fkey')),
		sa.Column('destination_id', sa.Integer, sa.ForeignKey('transport_locations.id', ondelete='CASCADE', name='transportations_destination_id_fkey')),
		sa.Column('departure_date_time', _tz(), nullable=False),
		sa.Column('scheduled_arrival_date_time', _tz(), nullable=False),
	)
	op.create_index('idx_transportations_vehicule_id', 'transportations', ['vehicule_id'])
	op.create_index('idx_transportations_origin_id', 'transportations', ['origin_id'])
	op.create_index('idx_transportations_destination_id', 'transportations', ['destination_id'])
	op.create_index('idx_transport_departure_date', 'transportations', ['departure_date_time'])
	op.create_index('idx_transport_arrival_date', 'transportations', ['scheduled_arrival_date_time'])

	# Purchases and PSE material
	op.create_table(
		'purchases',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('camp_product_id', sa.Integer, sa.ForeignKey('camp_products.id', ondelete='CASCADE', name='purchases_camp_product_id_fkey')),
		sa.Column('quantity_requested', sa.Integer, nullable=False),
		sa.Column('unit_format', sa.Integer, sa.ForeignKey('unit_format.id', ondelete='RESTRICT', name='purchases_unit_format_fkey')),
		sa.Column('quantity_received', sa.Integer),
		sa.Column('drop_off_date_time_requested', _tz()),
		sa.Column('actual_drop_off_date_time', _tz()),
		sa.Column('drop_off_location_id', sa.Integer, sa.ForeignKey('purchase_drop_off_locations.id', ondelete='RESTRICT', name='purchases_drop_off_location_id_fkey')),
	)
	op.create_index('idx_purchases_camp_product_id', 'purchases', ['camp_product_id'])
	op.create_index('idx_purchases_drop_off_location_id', 'purchases', ['drop_off_location_id'])
	op.create_index('idx_purchases_drop_off_dates', 'purchases', ['drop_off_date_time_requested', 'actual_drop_off_date_time'])

	op.create_table(
		'pse_material_used',
		sa.Column('id', sa.Integer, primary_key=True),
		sa.Column('code', sa.String, nullable=False),
		sa.Column('name', sa.String, nullable=False),
		sa.Column('project_id', sa.Integer, sa.ForeignKey('projects.id', ondelete='CASCADE', name='pse_material_used_project_id_fkey')),
		sa.Column('pse_responsable_id', sa.Integer, sa.ForeignKey('camp_people.id', ondelete='SET NULL', name='pse_material_used_pse_responsable_id_fkey')),
		sa.Column('camp_responsable_id', sa.Integer, sa.ForeignKey('camp_people.id', ondelete='SET NULL', name='pse_material_used_camp_responsable_id_fkey')),
		sa.Column('current_holder_id', sa.Integer, sa.ForeignKey('camp_people.id', ondelete='SET NULL', name='pse_material_used_current_holder_id_fkey')),
		sa.Column('image_path', sa.String),
	)


def downgrade() -> None:
	# Indexes go with their tables
	for table in (
		'pse_material_used',
		'purchases',
		'transportations',
		'requests',
		'camp_products',
		'children',
		'checklist_tasks',
		'camp_people_extra_data',
		'camp_people',
		'markets',
		'available_vehicules',
		'transport_locations',
		'projects',
		'roles',
		'teams',
		'request_types',
		'purchase_drop_off_locations',
		'purchase_group',
		'unit_format',
		'product_storage_types',
		'camp_product_types',
		'pse_odoo_products',
		'vehicules_type',
		'checklist_area',
	):
		op.drop_table(table)
