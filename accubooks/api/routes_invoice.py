import logging
from typing import Annotated, TypeAlias

from fastapi import APIRouter, Depends, Query, Response

from accubooks.api.dependencies import CompanyDep, DbDep
from accubooks.models import schemas
from accubooks.models.enums import InvoiceStatus
from accubooks.services.invoice_service import InvoiceService, build_invoice_service

router = APIRouter(prefix="/invoices", tags=["invoices"])
logger = logging.getLogger(__name__)


def get_invoice_service(db: DbDep) -> InvoiceService:
    return build_invoice_service(db)


InvoiceServiceDep: TypeAlias = Annotated[InvoiceService, Depends(get_invoice_service)]


@router.post("", response_model=schemas.InvoiceOutDetailed, status_code=201)
def create_invoice(data: schemas.InvoiceCreate, company: CompanyDep, svc: InvoiceServiceDep):
    """Create a Draft invoice; item GST and totals are computed server-side."""
    return svc.create_invoice(company.id, data.model_dump())


@router.get("", response_model=list[schemas.InvoiceOut])
def list_invoices(
    company: CompanyDep,
    svc: InvoiceServiceDep,
    search: str | None = Query(None, max_length=100, description="Customer name or invoice number"),
    status: InvoiceStatus | None = None,
):
    return svc.list_invoices(company.id, search=search, status=status.value if status else None)


@router.get("/{invoice_id}", response_model=schemas.InvoiceOutDetailed)
def get_invoice(invoice_id: int, company: CompanyDep, svc: InvoiceServiceDep):
    return svc.get_invoice(company.id, invoice_id)


@router.put("/{invoice_id}", response_model=schemas.InvoiceOutDetailed)
def update_invoice(invoice_id: int, data: schemas.InvoiceUpdate, company: CompanyDep, svc: InvoiceServiceDep):
    """Replace the invoice header and its whole item set, recomputing totals."""
    return svc.update_invoice(company.id, invoice_id, data.model_dump())


@router.patch("/{invoice_id}/status", response_model=schemas.InvoiceOutDetailed)
def update_invoice_status(
    invoice_id: int,
    data: schemas.InvoiceStatusUpdate,
    company: CompanyDep,
    svc: InvoiceServiceDep,
):
    return svc.update_status(company.id, invoice_id, data.status.value)


@router.delete("/{invoice_id}", status_code=204)
def delete_invoice(invoice_id: int, company: CompanyDep, svc: InvoiceServiceDep):
    svc.delete_invoice(company.id, invoice_id)
    return Response(status_code=204)
