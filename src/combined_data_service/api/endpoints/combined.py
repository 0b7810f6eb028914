"""
Combined data API endpoint.

Serves the join of comments, posts and users. Failures are converted to
plain-text 500 responses by the exception handler registered in ``main``.
"""

from typing import List

from fastapi import APIRouter, Depends, Request

from combined_data_service.api.client import CollectionClient
from combined_data_service.core.aggregator import CombinedDataAggregator
from combined_data_service.models import CombinedRecord

router = APIRouter()


def get_aggregator(request: Request) -> CombinedDataAggregator:
    """Build an aggregator on top of the application's shared HTTP client."""
    client = CollectionClient(client=request.app.state.http_client)
    return CombinedDataAggregator(client)


@router.get("/combinedData", response_model=List[CombinedRecord])
async def get_combined_data(
    aggregator: CombinedDataAggregator = Depends(get_aggregator)
) -> List[CombinedRecord]:
    """
    Fetch comments, posts and users and return their join.

    Returns:
        List[CombinedRecord]: One record per comment whose post exists
    """
    return await aggregator.combine()
