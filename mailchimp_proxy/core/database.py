# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""SQLAlchemy engine singleton and schema bootstrap."""
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from mailchimp_proxy.core.config import settings

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS mail_chimp_lists (
        id VARCHAR(36) NOT NULL PRIMARY KEY,
        mail_chimp_id VARCHAR(255) DEFAULT NULL,
        name VARCHAR(255) NOT NULL,
        contact TEXT NOT NULL,
        permission_reminder VARCHAR(255) NOT NULL,
        campaign_defaults TEXT NOT NULL,
        email_type_option BOOLEAN NOT NULL,
        use_archive_bar BOOLEAN DEFAULT NULL,
        notify_on_subscribe VARCHAR(255) DEFAULT NULL,
        notify_on_unsubscribe VARCHAR(255) DEFAULT NULL,
        visibility VARCHAR(255) DEFAULT NULL,
        double_optin BOOLEAN DEFAULT NULL,
        marketing_permissions BOOLEAN DEFAULT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS mail_chimp_members (
        id VARCHAR(36) NOT NULL PRIMARY KEY,
        list_id VARCHAR(36) NOT NULL,
        mail_chimp_id VARCHAR(255) DEFAULT NULL,
        email_address VARCHAR(255) NOT NULL,
        status VARCHAR(255) NOT NULL,
        email_type VARCHAR(255) DEFAULT NULL,
        language VARCHAR(255) DEFAULT NULL,
        vip BOOLEAN DEFAULT NULL,
        location TEXT DEFAULT NULL,
        marketing_permissions TEXT DEFAULT NULL,
        ip_signup VARCHAR(255) DEFAULT NULL,
        timestamp_signup VARCHAR(255) DEFAULT NULL,
        ip_opt VARCHAR(255) DEFAULT NULL,
        timestamp_opt VARCHAR(255) DEFAULT NULL,
        tags TEXT DEFAULT NULL,
        email_id VARCHAR(255) DEFAULT NULL,
        unique_email_id VARCHAR(255) DEFAULT NULL,
        member_rating INTEGER DEFAULT NULL
    )
    """,
    "CREATE INDEX IF NOT EXISTS ix_mail_chimp_members_list_id ON mail_chimp_members (list_id)",
)


def build_engine(url: str) -> Engine:
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # One shared connection, otherwise every thread sees an empty database.
            kwargs["poolclass"] = StaticPool
        return create_engine(url, **kwargs)
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.POOL_SIZE,
        max_overflow=settings.MAX_OVERFLOW,
        pool_recycle=settings.POOL_RECYCLE,
    )


def init_schema(target: Engine) -> None:
    with target.begin() as conn:
        for statement in SCHEMA:
            conn.execute(text(statement))


engine = build_engine(settings.DATABASE_URL)
