from fastapi import APIRouter

from app.core.config import settings


router = APIRouter(tags=['health'])


@router.get('/health')
def health() -> dict[str, str]:
    return {'service': settings.APP_NAME, 'status': 'ok', 'environment': settings.APP_ENV}
