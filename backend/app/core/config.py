from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str | None) -> list[str]:
    return [item.strip() for item in (value or '').split(',') if item.strip()]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra='forbid',
    )

    DATABASE_URL: str
    APP_NAME: str = 'ISP Tenant Routing API'
    APP_ENV: str = 'development'
    CORS_ORIGINS: str = 'http://localhost:3001'
    LOG_LEVEL: str = 'INFO'
    TRUST_PROXY_HEADERS: bool = False

    # Hostnames owned by the platform itself. Never treated as tenant domains.
    PLATFORM_HOSTS: str = 'localhost,127.0.0.1'
    PLATFORM_DOMAINS: str = ''
    PREVIEW_MARKERS: str = 'preview--'

    RESOLVE_LOCAL_API_BASE: str | None = None
    RESOLVE_API_BASES: str = ''
    RESOLVE_TIMEOUT_MS: int = 6_000

    ROUTING_EXEMPT_PATHS: str = '/api/domains,/domains,/api/v1/health'

    @field_validator('DATABASE_URL')
    @classmethod
    def validate_database_url(cls, value: str) -> str:
        if not value.startswith(('postgresql', 'sqlite')):
            raise ValueError('DATABASE_URL must point to PostgreSQL or SQLite')
        return value

    @field_validator('RESOLVE_TIMEOUT_MS')
    @classmethod
    def validate_resolve_timeout(cls, value: int) -> int:
        if value <= 0:
            raise ValueError('RESOLVE_TIMEOUT_MS must be positive')
        return value

    @property
    def cors_origins(self) -> list[str]:
        return _split_csv(self.CORS_ORIGINS)

    @property
    def platform_hosts(self) -> set[str]:
        return {item.lower() for item in _split_csv(self.PLATFORM_HOSTS)}

    @property
    def platform_domains(self) -> list[str]:
        return [item.lower().lstrip('.') for item in _split_csv(self.PLATFORM_DOMAINS)]

    @property
    def preview_markers(self) -> list[str]:
        return [item.lower() for item in _split_csv(self.PREVIEW_MARKERS)]

    @property
    def resolve_api_bases(self) -> list[str]:
        # Co-located API first, then the external bases in configured order.
        bases = [self.RESOLVE_LOCAL_API_BASE] if self.RESOLVE_LOCAL_API_BASE else []
        return bases + _split_csv(self.RESOLVE_API_BASES)

    @property
    def routing_exempt_paths(self) -> list[str]:
        return _split_csv(self.ROUTING_EXEMPT_PATHS)


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
