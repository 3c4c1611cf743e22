from fastapi import APIRouter

from customer_api.api.routes.customers import router as customers_router
from customer_api.api.routes.health import router as health_router

router = APIRouter()

router.include_router(customers_router)
router.include_router(health_router)
