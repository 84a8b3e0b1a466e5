from fastapi import APIRouter

from shipdash_api.routers import companies, shipments

api_router = APIRouter()

api_router.include_router(companies.router)
api_router.include_router(shipments.router)
