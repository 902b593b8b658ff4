"""initial schema: catalog, clients, intakes, samples, analysis metadata

Revision ID: 0001
Revises:
Create Date: 2026-10-18 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- 참조 카탈로그 ---
    op.create_table(
        "methods",
        sa.Column("method_number", sa.Integer(), nullable=False),
        sa.Column("revision_number", sa.Integer(), nullable=False),
        sa.Column("compound", sa.String(length=255), nullable=False),
        sa.Column("air_loq", sa.Float(), nullable=False),
        sa.Column("surface_loq", sa.Float(), nullable=False),
        sa.PrimaryKeyConstraint("method_number", "revision_number"),
    )
    op.create_index("ix_methods_compound", "methods", ["compound"])

    op.create_table(
        "employees",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_employees_name", "employees", ["name"])

    # --- 고객 ---
    op.create_table(
        "clients",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("company", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_clients_email", "clients", ["email"], unique=True)
    op.create_index("ix_clients_company", "clients", ["company"])

    # --- 의뢰 (보고서) ---
    op.create_table(
        "intakes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("client_id", sa.Integer(), nullable=False),
        sa.Column("num_samples", sa.Integer(), nullable=False),
        sa.Column("site_sampling", sa.String(length=255), nullable=True),
        sa.Column("sample_collector", sa.String(length=255), nullable=True),
        sa.Column("reporting_unit_air", sa.String(length=50), nullable=True),
        sa.Column("reporting_unit_surface", sa.String(length=50), nullable=True),
        sa.Column("method", sa.Integer(), nullable=False),
        sa.Column("revision", sa.Integer(), nullable=False),
        sa.Column("last_sample_seq", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("num_samples > 0", name="check_num_samples_positive"),
        sa.ForeignKeyConstraint(["client_id"], ["clients.id"]),
        sa.ForeignKeyConstraint(
            ["method", "revision"],
            ["methods.method_number", "methods.revision_number"],
            name="fk_intakes_method_revision",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_intakes_client_id", "intakes", ["client_id"])

    # --- 시료 ---
    op.create_table(
        "samples",
        sa.Column("report_id", sa.Integer(), nullable=False),
        sa.Column("sample_seq", sa.Integer(), nullable=False),
        sa.Column("client_assigned_name", sa.String(length=255), nullable=False),
        sa.Column("date_sampled", sa.Date(), nullable=False),
        sa.Column("air_volume", sa.Float(), nullable=True),
        sa.Column("surface_area", sa.Float(), nullable=True),
        sa.Column("mass", sa.Float(), nullable=True),
        sa.CheckConstraint(
            "(air_volume IS NOT NULL AND surface_area IS NULL) OR "
            "(air_volume IS NULL AND surface_area IS NOT NULL)",
            name="check_measurement_type",
        ),
        sa.CheckConstraint("sample_seq > 0", name="check_sample_seq_positive"),
        sa.ForeignKeyConstraint(["report_id"], ["intakes.id"]),
        sa.PrimaryKeyConstraint("report_id", "sample_seq"),
    )

    # --- 분석 메타데이터 ---
    op.create_table(
        "analysis_metadata",
        sa.Column("report_id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("num_samples_analyzed", sa.Integer(), nullable=False),
        sa.Column("conditions_upon_arrival", sa.String(length=255), nullable=False),
        sa.Column("storage_conditions", sa.String(length=255), nullable=False),
        sa.Column("analysis_unit", sa.String(length=50), nullable=False),
        sa.Column("extraction_date", sa.Date(), nullable=True),
        sa.Column("analysis_start_date", sa.Date(), nullable=True),
        sa.Column("analysis_end_date", sa.Date(), nullable=True),
        sa.Column("date_received", sa.Date(), nullable=True),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("date_reported", sa.Date(), nullable=True),
        sa.Column("project_number", sa.String(length=100), nullable=True),
        sa.Column("preparer_id", sa.Integer(), nullable=True),
        sa.Column("reviewer_id", sa.Integer(), nullable=True),
        sa.Column("updated_at", sa.TIMESTAMP(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("num_samples_analyzed > 0", name="check_num_samples_analyzed_positive"),
        sa.CheckConstraint(
            "(extraction_date IS NULL OR analysis_start_date IS NULL OR extraction_date <= analysis_start_date) AND "
            "(analysis_start_date IS NULL OR analysis_end_date IS NULL OR analysis_end_date >= analysis_start_date)",
            name="check_analysis_dates",
        ),
        sa.ForeignKeyConstraint(["report_id"], ["intakes.id"]),
        sa.ForeignKeyConstraint(["preparer_id"], ["employees.id"]),
        sa.ForeignKeyConstraint(["reviewer_id"], ["employees.id"]),
        sa.PrimaryKeyConstraint("report_id"),
    )


def downgrade() -> None:
    op.drop_table("analysis_metadata")
    op.drop_table("samples")
    op.drop_index("ix_intakes_client_id", table_name="intakes")
    op.drop_table("intakes")
    op.drop_index("ix_clients_company", table_name="clients")
    op.drop_index("ix_clients_email", table_name="clients")
    op.drop_table("clients")
    op.drop_index("ix_employees_name", table_name="employees")
    op.drop_table("employees")
    op.drop_index("ix_methods_compound", table_name="methods")
    op.drop_table("methods")
