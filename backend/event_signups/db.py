from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from loguru import logger
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from .core.config import settings

VIEW_NAME = "events_with_signups"

# Mirrors the persisted definition: every events column passes through
# unchanged and events without signups report zero.
EVENTS_WITH_SIGNUPS_SELECT = """
SELECT
    events.*,
    COALESCE(t_signup_count.count, 0) AS signups
FROM
    events
    LEFT JOIN
        (
            SELECT
                count(id) AS count,
                event
            FROM
                event_signups
            GROUP BY
                event
        ) t_signup_count
    ON events.id = t_signup_count.event
"""


def _ensure_sqlite_path(url: str) -> None:
    if not url.startswith("sqlite"):
        return

    parsed = make_url(url)
    database = parsed.database
    if not database or database == ":memory:":
        return

    path = Path(database)
    path.parent.mkdir(parents=True, exist_ok=True)


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    # Let SQLAlchemy emit BEGIN itself so SAVEPOINT rollbacks behave.
    dbapi_connection.isolation_level = None
    # SQLite ignores REFERENCES / ON DELETE CASCADE unless asked per connection.
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _begin_sqlite_transaction(connection) -> None:
    connection.exec_driver_sql("BEGIN")


def _create_engine(url: str, *, echo: bool = False) -> Engine:
    connect_args: dict[str, object] = {}
    engine_kwargs: dict[str, object] = {
        "echo": echo,
        "future": True,
        "pool_pre_ping": True,
    }

    parsed = make_url(url)
    backend = parsed.get_backend_name()
    driver = parsed.get_driver_name()

    if backend == "sqlite":
        connect_args["check_same_thread"] = False
        _ensure_sqlite_path(url)
    else:
        engine_kwargs["pool_recycle"] = 300

        if driver == "psycopg":
            connect_args["prepare_threshold"] = None

    if connect_args:
        engine_kwargs["connect_args"] = connect_args

    engine = create_engine(url, **engine_kwargs)
    if backend == "sqlite":
        event.listen(engine, "connect", _configure_sqlite_connection)
        event.listen(engine, "begin", _begin_sqlite_transaction)
    return engine


def _create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=True, autocommit=False, future=True)


def build_db_components(url: str, *, echo: bool = False) -> tuple[Engine, sessionmaker[Session]]:
    engine = _create_engine(url, echo=echo)
    session_factory = _create_session_factory(engine)
    return engine, session_factory


engine, SessionLocal = build_db_components(settings.resolved_database_url, echo=settings.debug)
Base = declarative_base()


def _create_views(bind: Engine) -> None:
    with bind.begin() as connection:
        if bind.dialect.name == "postgresql":
            connection.execute(
                text(f"CREATE OR REPLACE VIEW {VIEW_NAME} AS {EVENTS_WITH_SIGNUPS_SELECT}")
            )
        else:
            # SQLite has no CREATE OR REPLACE VIEW.
            connection.execute(text(f"DROP VIEW IF EXISTS {VIEW_NAME}"))
            connection.execute(text(f"CREATE VIEW {VIEW_NAME} AS {EVENTS_WITH_SIGNUPS_SELECT}"))


def get_db() -> Iterator[Session]:
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def session_scope(factory: sessionmaker[Session] | None = None) -> Iterator[Session]:
    session = (factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(bind: Engine | None = None) -> None:
    from . import models  # noqa: F401

    target = bind or engine
    tables = [table for table in Base.metadata.sorted_tables if not table.info.get("is_view")]
    Base.metadata.create_all(bind=target, tables=tables)
    _create_views(target)
    logger.debug("Schema ready on {} ({} tables, view {})", target.dialect.name, len(tables), VIEW_NAME)
