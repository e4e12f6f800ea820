"""Feature flag status endpoint.

Reports which configured flags are enabled for the calling request.
"""

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from feature_flag_bundle.api.dependencies import get_resolver
from feature_flag_bundle.providers.registry import FeatureFlagResolver

router = APIRouter(prefix="/api")


class FeatureFlagStatusResponse(BaseModel):
    """Flag status for the calling request.

    Attributes:
        total_flags: Number of configured flags across providers
        enabled_flags: Number of those enabled for this request
        providers: Provider name -> flag name -> enabled
    """

    total_flags: int
    enabled_flags: int
    providers: dict[str, dict[str, bool]]


@router.get("/feature-flags", response_model=FeatureFlagStatusResponse)
async def feature_flag_status(
    request: Request,
    resolver: FeatureFlagResolver = Depends(get_resolver),
) -> FeatureFlagStatusResponse:
    """Evaluate every configured flag against the calling request."""
    return FeatureFlagStatusResponse(**resolver.status(request))
