"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (read-only here; accounts are managed by the web frontend)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String, primary_key=True),  # UUID as string
    Column("email", String(255), nullable=False, unique=True),
    Column("name", String(255), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
)


# ============================================================================
# PROJECTS TABLE
# ============================================================================
projects_table = Table(
    "projects",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column("owner_id", String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index("ix_projects_owner_id", projects_table.c.owner_id)


# ============================================================================
# PROJECT MEMBERS TABLE
# ============================================================================
project_members_table = Table(
    "project_members",
    metadata,
    Column("id", String, primary_key=True),
    Column("project_id", String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", String, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("role", String(32), nullable=False),  # MemberRole value
    Column("assigned_locales", Text, nullable=True),  # JSON list of codes, NULL = unrestricted
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("project_id", "user_id", name="uq_project_members_project_user"),
)

Index("ix_project_members_user_id", project_members_table.c.user_id)


# ============================================================================
# API KEYS TABLE
# ============================================================================
api_keys_table = Table(
    "api_keys",
    metadata,
    Column("id", String, primary_key=True),
    Column("project_id", String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
    Column("name", String(255), nullable=False),
    Column("key_hash", String(64), nullable=False, unique=True),  # SHA256 hash
    Column("role", String(32), nullable=False),  # ApiKeyRole value
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("revoked_at", DateTime(timezone=True), nullable=True),
)

Index("ix_api_keys_project_id", api_keys_table.c.project_id)


# ============================================================================
# LOCALES TABLE
# ============================================================================
locales_table = Table(
    "locales",
    metadata,
    Column("id", String, primary_key=True),
    Column("project_id", String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
    Column("code", String(32), nullable=False),
    Column("language", String(64), nullable=True),
    Column("region", String(64), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("project_id", "code", name="uq_locales_project_code"),
)


# ============================================================================
# LABELS TABLE
# ============================================================================
labels_table = Table(
    "labels",
    metadata,
    Column("id", String, primary_key=True),
    Column("project_id", String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
    Column("name", String(255), nullable=False),
    Column("color", String(16), nullable=False, default="#808080"),
    Column("value", Text, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("project_id", "name", name="uq_labels_project_name"),
)


# ============================================================================
# TERMS TABLE
# ============================================================================
terms_table = Table(
    "terms",
    metadata,
    Column("id", String, primary_key=True),
    Column("project_id", String, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False),
    Column("value", Text, nullable=False),
    Column("context", Text, nullable=True),
    Column("is_locked", Boolean, nullable=False, default=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index("ix_terms_project_id", terms_table.c.project_id)


# ============================================================================
# TERM LABELS TABLE (many-to-many)
# ============================================================================
term_labels_table = Table(
    "term_labels",
    metadata,
    Column("term_id", String, ForeignKey("terms.id", ondelete="CASCADE"), primary_key=True),
    Column("label_id", String, ForeignKey("labels.id", ondelete="CASCADE"), primary_key=True),
)


# ============================================================================
# TRANSLATIONS TABLE
# ============================================================================
translations_table = Table(
    "translations",
    metadata,
    Column("id", String, primary_key=True),
    Column("term_id", String, ForeignKey("terms.id", ondelete="CASCADE"), nullable=False),
    Column("locale_id", String, ForeignKey("locales.id", ondelete="CASCADE"), nullable=False),
    Column("value", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("term_id", "locale_id", name="uq_translations_term_locale"),
)

Index("ix_translations_locale_id", translations_table.c.locale_id)
