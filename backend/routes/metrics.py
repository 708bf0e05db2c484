import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request, Response

from config import Settings
from ingest.auth import check_authorization
from ingest.parser import parse_user_model_metrics, read_payload
from ingest.paths import derive_metrics_path
from ingest.timestamps import now_ns
from ingest.writer import save_user_model_metrics
from models.metrics import UserModelMetrics

logger = logging.getLogger(__name__)

router = APIRouter(tags=["metrics"])


# ---------- Dependencies ----------

def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def require_api_key(
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> None:
    check_authorization(authorization, settings.api_key)


# ---------- Endpoint ----------

@router.post("/user-model-metrics", dependencies=[Depends(require_api_key)])
async def ingest_user_model_metrics(
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Stores one usage event as its own JSON file.

    Authorization runs first (dependency), then the body is read and parsed,
    stamped with the receipt time, and written under the ISO-week directory.
    Failures raise MetricsIngestError subclasses, mapped to 400/401/500 by
    the app-level handler.
    """
    data = await read_payload(request)
    payload = parse_user_model_metrics(data)
    record = UserModelMetrics.from_payload(payload, created_at=now_ns())

    out_path = derive_metrics_path(settings.data_path, record.created_at)
    await asyncio.to_thread(save_user_model_metrics, record, out_path)

    return Response(status_code=200)
