from typing import List
from fastapi import APIRouter

from app.schemas.catalog import OptionCatalog, SelectablePlan
from app.services import catalog as catalog_service

router = APIRouter(
    prefix="/catalog",
    tags=["Catalog"]
)

@router.get("/plans", response_model=List[SelectablePlan])
def get_plans():
    return catalog_service.PLANS

@router.get("/options", response_model=OptionCatalog)
def get_options():
    return catalog_service.OPTIONS
