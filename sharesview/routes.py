"""SharesView routes

The HTML page, its JSON twin for script clients, the bundled default
dataset, and a health check.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse, HTMLResponse
from pydantic import BaseModel

from sharesview.config import get_settings
from sharesview.pipeline import load_view
from sharesview.presentation import render_page

router = APIRouter(tags=["sharesview"])


# ---------------------------------------------------------------------------
# Response Models
# ---------------------------------------------------------------------------

class SharesViewResponse(BaseModel):
    state: str  # loading, content, error
    page_title: str
    heading: str
    entity_name: str
    max_value: str
    max_fy: str
    min_value: str
    min_fy: str
    error_message: str
    loader_visible: bool
    content_visible: bool
    error_visible: bool


class HealthResponse(BaseModel):
    status: str
    service: str
    relay_url: str
    sec_api_base: str
    data_path_exists: bool


def _cik_param(request: Request) -> Optional[str]:
    # first occurrence wins, like URLSearchParams.get
    values = request.query_params.getlist("CIK")
    return values[0] if values else None


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------

@router.get("/", response_class=HTMLResponse)
async def shares_page(request: Request):
    """Render the shares-outstanding page for ``?CIK=`` or the default dataset."""
    view = await load_view(_cik_param(request))
    return HTMLResponse(render_page(view))


@router.get("/api/shares", response_model=SharesViewResponse)
async def api_shares(request: Request):
    view = await load_view(_cik_param(request))
    return SharesViewResponse(**view.to_dict())


@router.get("/data.json")
def default_dataset():
    path = get_settings().data_path
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Default dataset not found")
    return FileResponse(path, media_type="application/json")


@router.get("/api/health", response_model=HealthResponse)
def health():
    settings = get_settings()
    return HealthResponse(
        status="ok",
        service="sharesview",
        relay_url=settings.relay_url,
        sec_api_base=settings.sec_api_base,
        data_path_exists=settings.data_path.is_file(),
    )
