# Catalog/catalog.py
import logging

from fastapi import APIRouter, HTTPException, Query

from GREENCROSS.Catalog.models import CategoryFilter, Product, StrainFilter
from GREENCROSS.Catalog.products import PRODUCTS, featured_products, filter_products, get_product_by_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["products"])


# ==============================
# PUBLIC: LIST / FILTER PRODUCTS
# ==============================
@router.get("", response_model=dict)
async def list_products(
    search: str = Query("", max_length=100),
    category: CategoryFilter = Query("all"),
    strain: StrainFilter = Query("all"),
):
    """
    Catalog listing with the storefront filters.
    Unknown category/strain values are rejected by FastAPI with 422.
    """
    results = filter_products(PRODUCTS, search=search, category=category, strain=strain)
    return {
        "data": [product.model_dump() for product in results],
        "total": len(results),
    }


# ==============================
# PUBLIC: FEATURED (home page)
# ==============================
@router.get("/featured", response_model=dict)
async def get_featured_products():
    return {"data": [product.model_dump() for product in featured_products()]}


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str):
    product = get_product_by_id(product_id)
    if product is None:
        logger.info("Product lookup miss id=%s", product_id)
        raise HTTPException(status_code=404, detail="Product not found")
    return product
