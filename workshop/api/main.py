from fastapi import APIRouter

from .routes import analytics, health, resources, work_orders

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])

# Work order lifecycle
api_router.include_router(work_orders.router)

# Shop resources and reporting
api_router.include_router(resources.router)
api_router.include_router(analytics.router)
