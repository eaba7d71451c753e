import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_list_settings_are_parsed() -> None:
    config = Settings(
        DATABASE_URL='sqlite://',
        PLATFORM_HOSTS=' OltApp.ISPPoint.com , localhost,',
        PLATFORM_DOMAINS='.isppoint.com',
        RESOLVE_LOCAL_API_BASE='http://127.0.0.1:3001',
        RESOLVE_API_BASES='https://edge-1.example.com, https://edge-2.example.com',
    )

    assert config.platform_hosts == {'oltapp.isppoint.com', 'localhost'}
    assert config.platform_domains == ['isppoint.com']
    assert config.resolve_api_bases == [
        'http://127.0.0.1:3001',
        'https://edge-1.example.com',
        'https://edge-2.example.com',
    ]


def test_rejects_unsupported_database() -> None:
    with pytest.raises(ValidationError):
        Settings(DATABASE_URL='mysql://root@localhost/isp')


def test_rejects_non_positive_timeout() -> None:
    with pytest.raises(ValidationError):
        Settings(DATABASE_URL='sqlite://', RESOLVE_TIMEOUT_MS=0)
