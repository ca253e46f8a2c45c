from typing import Any

from fastapi import APIRouter

from dependencies.copilot import SourceCatalogDep
from models.source_items import SourceKind
from schemas.api import ApiResponse
from schemas.copilot import serialize_source_item


router = APIRouter(prefix="/source-items", tags=["source-items"])


@router.get("/{kind}", response_model=ApiResponse[list[dict[str, Any]]])
def list_source_items(
    kind: SourceKind, catalog: SourceCatalogDep
) -> ApiResponse[list[dict[str, Any]]]:
    """List the reviews, emails or calls a draft can be requested for."""
    items = [serialize_source_item(item) for item in catalog.list_items(kind)]
    return ApiResponse(
        success=True,
        data=items,
        message=f"Retrieved {len(items)} {kind} items",
    )
