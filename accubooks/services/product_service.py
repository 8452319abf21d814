"""Products/services catalog, scoped by company."""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from accubooks.core.exceptions import ProductNotFoundError
from accubooks.models.models import InvoiceItem, ProductService

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = ("item_name", "hsn_sac_code", "default_sale_price", "default_gst_rate")
NULLABLE_FIELDS = {"hsn_sac_code"}


class ProductCatalogService:
    def __init__(self, db: Session):
        self.db = db

    def list_products(self, company_id: int, search: str | None = None) -> list[ProductService]:
        query = self.db.query(ProductService).filter(ProductService.company_id == company_id)
        if search:
            pattern = f"%{search.strip()}%"
            query = query.filter(
                ProductService.item_name.ilike(pattern) | ProductService.hsn_sac_code.ilike(pattern)
            )
        return query.order_by(ProductService.item_name, ProductService.id).all()

    def get_product(self, company_id: int, product_id: int) -> ProductService:
        product = (
            self.db.query(ProductService)
            .filter(ProductService.id == product_id, ProductService.company_id == company_id)
            .one_or_none()
        )
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    def create_product(self, company_id: int, data: dict[str, object]) -> ProductService:
        product = ProductService(
            company_id=company_id,
            **{field: data[field] for field in PRODUCT_FIELDS if data.get(field) is not None},
        )
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        logger.info("Created product/service %s (%s) for company %s", product.id, product.item_name, company_id)
        return product

    def update_product(self, company_id: int, product_id: int, data: dict[str, object]) -> ProductService:
        product = self.get_product(company_id, product_id)
        for field in PRODUCT_FIELDS:
            if field in data and (data[field] is not None or field in NULLABLE_FIELDS):
                setattr(product, field, data[field])
        self.db.commit()
        self.db.refresh(product)
        logger.info("Updated product/service %s for company %s", product.id, company_id)
        return product

    def delete_product(self, company_id: int, product_id: int) -> None:
        product = self.get_product(company_id, product_id)
        # Items keep their own description and rate; only the link goes
        detached = (
            self.db.query(InvoiceItem)
            .filter(InvoiceItem.product_service_id == product.id)
            .update({InvoiceItem.product_service_id: None}, synchronize_session="fetch")
        )
        self.db.delete(product)
        self.db.commit()
        logger.info("Deleted product/service %s for company %s (detached from %d invoice items)", product_id, company_id, detached)
