from alembic import op
import sqlalchemy as sa

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        "providers",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("contact_email", sa.String(length=320), nullable=True),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("state", sa.String(length=2), nullable=True),
    )

    op.create_table(
        "resources",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("category", sa.String(length=30), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("state", sa.String(length=2), nullable=True),
        sa.Column("provider_id", sa.String(), sa.ForeignKey("providers.id"), nullable=True),
    )
    op.create_index("ix_resources_category_title", "resources", ["category", "title"])

    op.create_table(
        "listings",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("provider_id", sa.String(), sa.ForeignKey("providers.id"), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("state", sa.String(length=2), nullable=False, server_default="GA"),
        sa.Column("monthly_cost", sa.Numeric(10, 2), nullable=True),
        sa.Column("pets_allowed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("accessible", sa.Boolean(), nullable=False, server_default=sa.false()),
    )
    op.create_index("ix_listings_state_cost", "listings", ["state", "monthly_cost"])

    op.create_table(
        "applications",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("listing_id", sa.String(), sa.ForeignKey("listings.id"), nullable=False),
        sa.Column("full_name", sa.String(length=200), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone", sa.String(length=40), nullable=True),
        sa.Column("state", sa.String(length=100), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("submitted_utc", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_applications_listing_id", "applications", ["listing_id"])

def downgrade():
    op.drop_index("ix_applications_listing_id", table_name="applications")
    op.drop_table("applications")

    op.drop_index("ix_listings_state_cost", table_name="listings")
    op.drop_table("listings")

    op.drop_index("ix_resources_category_title", table_name="resources")
    op.drop_table("resources")

    op.drop_table("providers")
