from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from accubooks.api.routes_accounts import router as accounts_router
from accubooks.api.routes_company import router as company_router
from accubooks.api.routes_expense import router as expense_router
from accubooks.api.routes_health import router as health_router
from accubooks.api.routes_invoice import router as invoice_router
from accubooks.api.routes_metrics import router as metrics_router
from accubooks.api.routes_products import router as products_router
from accubooks.api.routes_reports import router as reports_router
from accubooks.core.config import settings
from accubooks.core.errors import register_error_handlers
from accubooks.core.logger import init_logging


def create_app() -> FastAPI:
    init_logging()

    # Interactive docs are disabled in production
    is_production = settings.ENV.lower() == "prod"
    app = FastAPI(
        title=settings.APP_NAME,
        debug=False,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
        openapi_url=None if is_production else "/openapi.json",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )
    register_error_handlers(app)
    app.include_router(company_router)
    app.include_router(accounts_router)
    app.include_router(products_router)
    app.include_router(invoice_router)
    app.include_router(expense_router)
    app.include_router(reports_router)
    app.include_router(metrics_router)
    app.include_router(health_router)
    return app


app = create_app()
