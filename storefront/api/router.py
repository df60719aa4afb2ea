"""
Central API router – registers all endpoint sub-routers under /api.
"""
from fastapi import APIRouter
import logging

from storefront.api.endpoints import auth, categories, orders, products, users

logger = logging.getLogger(__name__)

api_router = APIRouter(prefix="/api")

logger.info("Registering API routers")
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(categories.router)
api_router.include_router(products.router)
api_router.include_router(orders.router)
