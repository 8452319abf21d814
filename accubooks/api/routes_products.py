from fastapi import APIRouter, Query, Response

from accubooks.api.dependencies import CompanyDep, DbDep
from accubooks.models import schemas
from accubooks.services.product_service import ProductCatalogService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("", response_model=list[schemas.ProductOut])
def list_products(company: CompanyDep, db: DbDep, search: str | None = Query(None, max_length=100)):
    return ProductCatalogService(db).list_products(company.id, search)


@router.post("", response_model=schemas.ProductOut, status_code=201)
def create_product(data: schemas.ProductCreate, company: CompanyDep, db: DbDep):
    return ProductCatalogService(db).create_product(company.id, data.model_dump())


@router.get("/{product_id}", response_model=schemas.ProductOut)
def get_product(product_id: int, company: CompanyDep, db: DbDep):
    return ProductCatalogService(db).get_product(company.id, product_id)


@router.patch("/{product_id}", response_model=schemas.ProductOut)
def update_product(product_id: int, data: schemas.ProductUpdate, company: CompanyDep, db: DbDep):
    return ProductCatalogService(db).update_product(company.id, product_id, data.model_dump(exclude_unset=True))


@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int, company: CompanyDep, db: DbDep):
    """Delete a catalog entry; invoice items that used it keep their own values."""
    ProductCatalogService(db).delete_product(company.id, product_id)
    return Response(status_code=204)
