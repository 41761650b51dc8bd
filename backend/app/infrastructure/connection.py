"""Connection Factory - resolves the PostgreSQL connection descriptor from settings.

Invariants:
    - kind is always "postgres"; entities always empty; synchronize always False
    - port parsed base-10 from DB_PORT (default "5432"), range 0-65535
    - Missing DB_HOST / DB_USERNAME / DB_PASSWORD / DB_NAME raise ConfigurationError
    - Password never rendered by repr() or logs

Design Decisions:
    - Plain function of the Settings object: FastAPI lifespan calls it once,
      no container needed
    - Validation happens here (startup), so a missing host fails the boot
      instead of falling back to libpq's localhost default
"""

import logging
import re
from dataclasses import dataclass, field

from sqlalchemy.engine import URL

from app.config import Settings
from app.core.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PORT = "5432"
DRIVER_NAME = "postgresql+asyncpg"
REQUIRED_KEYS = ("DB_HOST", "DB_USERNAME", "DB_PASSWORD", "DB_NAME")
_PORT_PATTERN = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Resolved parameters needed to open the database connection pool."""
    host: str
    port: int
    username: str
    password: str = field(repr=False)
    database: str
    kind: str = "postgres"
    entities: tuple[type, ...] = ()
    synchronize: bool = False

    def url(self) -> URL:
        """SQLAlchemy URL for the async engine."""
        return URL.create(
            drivername=DRIVER_NAME,
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )


def _parse_port(raw: str) -> int:
    text = str(raw).strip()
    if not _PORT_PATTERN.fullmatch(text):
        raise ConfigurationError(f"DB_PORT must be a base-10 integer, got {raw!r}")
    port = int(text, 10)
    if not 0 <= port <= 65535:
        raise ConfigurationError(f"DB_PORT out of range: {port}")
    return port


def build_connection_descriptor(settings: Settings) -> ConnectionDescriptor:
    """Build the connection descriptor from process-wide settings.

    Raises:
        ConfigurationError: a required key is unset/empty or DB_PORT is invalid.
    """
    missing = [key for key in REQUIRED_KEYS if not settings.get(key)]
    if missing:
        raise ConfigurationError(
            f"Missing required database settings: {', '.join(missing)}",
            missing_keys=missing,
        )

    descriptor = ConnectionDescriptor(
        host=settings.get("DB_HOST"),
        port=_parse_port(settings.get("DB_PORT", DEFAULT_PORT)),
        username=settings.get("DB_USERNAME"),
        password=settings.get("DB_PASSWORD"),
        database=settings.get("DB_NAME"),
        entities=(),
        synchronize=False,
    )
    logger.info(
        f"Database target resolved: {descriptor.host}:{descriptor.port}/{descriptor.database}",
        extra={"db_host": descriptor.host, "db_name": descriptor.database},
    )
    return descriptor
