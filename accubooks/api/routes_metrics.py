from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from accubooks.api.dependencies import CurrentUserDep

router = APIRouter(tags=["metrics"])


@router.get("/metrics")
def metrics_endpoint(_user: CurrentUserDep) -> Response:
    # Counters are incremented at event points; just expose the registry.
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
