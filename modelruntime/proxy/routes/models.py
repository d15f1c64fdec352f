"""Models routes."""

from fastapi import APIRouter, HTTPException, Query, Request, status

from modelruntime.providers.registry import DEFAULT_PROVIDER
from modelruntime.proxy.dependencies import get_provider_instance
from modelruntime.types import ModelList

router = APIRouter(tags=["models"])


@router.get("/models", response_model_by_alias=True)
async def list_models(
    request: Request,
    provider: str = Query(default=DEFAULT_PROVIDER, description="Provider to list models for"),
) -> ModelList:
    """List the provider's active models.

    Catalog fetches are best-effort: an unreachable vendor yields an empty list.
    """
    try:
        adapter = get_provider_instance(request, provider)
    except KeyError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Provider '{provider}' is not registered",
        )
    return ModelList(data=await adapter.models())
