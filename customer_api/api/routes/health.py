from fastapi import APIRouter
from fastapi.responses import JSONResponse

from customer_api.core.database import GetDBDep, check_database_health

router = APIRouter(tags=["Health"])


@router.get("/health")
def health(db: GetDBDep):
    """Saúde do banco; 503 quando a query de teste falha"""
    status = check_database_health(db)
    return JSONResponse(status_code=200 if status["healthy"] else 503, content=status)
