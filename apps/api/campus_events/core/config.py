import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()


def _bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "y", "on"}


def _csv(val: str | None, default: list[str]) -> list[str]:
    if not val:
        return default
    return [v.strip() for v in val.split(",") if v.strip()]


@dataclass(frozen=True)
class Settings:
    env: str = os.getenv("ENV", "local")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # DB / Redis
    database_url: str = os.getenv("DATABASE_URL", "sqlite+pysqlite:///./campus_events.db")
    auto_create_schema: bool = _bool(os.getenv("AUTO_CREATE_SCHEMA"), default=True)
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    redis_socket_timeout: float = float(os.getenv("REDIS_SOCKET_TIMEOUT", "0.5"))

    # Access tokens
    jwt_secret: str = os.getenv("JWT_SECRET", "change-this-secret")
    jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
    jwt_issuer: str = os.getenv("JWT_ISSUER", "campus-events")
    jwt_audience: str = os.getenv("JWT_AUDIENCE", "campus-events-web")
    access_token_ttl_seconds: int = int(os.getenv("ACCESS_TOKEN_TTL_SECONDS", "86400"))
    # Re-read the role from the users table on every authenticated call
    # instead of trusting the token claim.
    auth_recheck_role: bool = _bool(os.getenv("AUTH_RECHECK_ROLE"), default=False)

    # Account policy
    institutional_email_pattern: str = os.getenv(
        "INSTITUTIONAL_EMAIL_PATTERN",
        r"^2-u\d{4}@students\.git\.edu$",
    )

    # CORS
    cors_allow_origins: list[str] = field(
        default_factory=lambda: _csv(
            os.getenv("CORS_ALLOW_ORIGINS"),
            default=["http://localhost:3000", "http://127.0.0.1:3000"],
        )
    )

    # Security headers
    security_headers_enabled: bool = _bool(
        os.getenv("SECURITY_HEADERS_ENABLED"),
        default=True,
    )

    # Rate limiting
    rate_limit_enabled: bool = _bool(os.getenv("RATE_LIMIT_ENABLED"), default=True)
    rate_limit_default: str = os.getenv("RATE_LIMIT_DEFAULT", "60/minute")
    rate_limit_auth: str = os.getenv("RATE_LIMIT_AUTH", "10/minute")
    rate_limit_exempt_paths: list[str] = field(
        default_factory=lambda: _csv(
            os.getenv("RATE_LIMIT_EXEMPT_PATHS"),
            default=["/health", "/metrics"],
        )
    )


settings = Settings()
