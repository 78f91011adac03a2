"""
API router aggregation.
"""
from fastapi import APIRouter
from app.api.v1.endpoints import auth, languages, translations, export

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(auth.router)
api_router.include_router(languages.router)
api_router.include_router(translations.router)
api_router.include_router(export.router)
