import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.endpoints import domains, pages
from app.api.v1.router import api_router
from app.core.config import settings
from app.db.session import SessionLocal
from app.multitenancy.middleware import CustomDomainMiddleware


logging.basicConfig(level=settings.LOG_LEVEL.upper(), format='%(asctime)s %(levelname)s %(name)s: %(message)s')


app = FastAPI(
    title=settings.APP_NAME,
    version='0.1.0',
    openapi_url='/api/v1/openapi.json',
    docs_url='/api/v1/docs',
    redoc_url='/api/v1/redoc',
)

app.add_middleware(CustomDomainMiddleware, session_factory=SessionLocal)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

app.include_router(api_router, prefix='/api/v1')
app.include_router(domains.router, prefix='/api')
# Unprefixed alias kept for older deployments that call {base}/domains/resolve.
app.include_router(domains.router, include_in_schema=False)
app.include_router(pages.router)
