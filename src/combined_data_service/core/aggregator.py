"""
Aggregation of the three upstream collections into combined records.

The three fetches have no dependency on each other and are issued
concurrently; the join runs once all of them have completed.
"""

import asyncio
from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from combined_data_service.api.client import CollectionClient
from combined_data_service.config import get_settings
from combined_data_service.core.joiner import join
from combined_data_service.models import CombinedRecord

Collections = Tuple[List[Dict[str, Any]], List[Dict[str, Any]], List[Dict[str, Any]]]


class CombinedDataAggregator:
    """Fetches comments, posts and users and joins them."""

    def __init__(
        self,
        client: CollectionClient,
        comments_url: Optional[str] = None,
        posts_url: Optional[str] = None,
        users_url: Optional[str] = None
    ):
        """
        Initialize the aggregator.

        Args:
            client: Client used for the upstream requests
            comments_url: Comments endpoint, defaults to settings
            posts_url: Posts endpoint, defaults to settings
            users_url: Users endpoint, defaults to settings
        """
        settings = get_settings()
        self.client = client
        self.comments_url = comments_url or settings.comments_url
        self.posts_url = posts_url or settings.posts_url
        self.users_url = users_url or settings.users_url

    async def fetch_collections(self) -> Collections:
        """
        Fetch the three collections concurrently.

        Raises:
            TransportError: If any upstream request fails
            DecodeError: If any upstream body is malformed
        """
        comments, posts, users = await asyncio.gather(
            self.client.fetch(self.comments_url),
            self.client.fetch(self.posts_url),
            self.client.fetch(self.users_url),
        )
        return comments, posts, users

    async def combine(self) -> List[CombinedRecord]:
        """
        Fetch all collections and join them.

        Returns:
            List[CombinedRecord]: Joined records in comment order

        Raises:
            CombinedDataError: If any fetch or the join fails
        """
        comments, posts, users = await self.fetch_collections()
        records = join(comments, posts, users)
        logger.info(
            f"Combined {len(comments)} comments, {len(posts)} posts and "
            f"{len(users)} users into {len(records)} records"
        )
        return records


async def combine_once(
    comments_url: Optional[str] = None,
    posts_url: Optional[str] = None,
    users_url: Optional[str] = None,
    timeout: Optional[float] = None
) -> List[CombinedRecord]:
    """Run a single aggregation with a short-lived client."""
    async with CollectionClient(timeout=timeout) as client:
        aggregator = CombinedDataAggregator(
            client,
            comments_url=comments_url,
            posts_url=posts_url,
            users_url=users_url,
        )
        return await aggregator.combine()
