"""
PostgREST Swipe Repository.

Mapping:
- Table: matches (user_id, matched_user_id, is_liked, is_super_like)
"""

from unimatch.domain.entities.swipe import Swipe
from unimatch.domain.ports.repositories import SwipeRepository
from unimatch.domain.value_objects.user_id import UserId
from unimatch.infrastructure.postgrest.client import PostgrestClient


class PostgrestSwipeRepository(SwipeRepository):
    _client: PostgrestClient

    def __init__(self, client: PostgrestClient):
        self._client = client

    async def save(self, swipe: Swipe) -> None:
        await self._client.insert(
            "matches",
            {
                "user_id": swipe.user_id.value,
                "matched_user_id": swipe.target_id.value,
                "is_liked": swipe.liked,
                "is_super_like": swipe.super_like,
            },
        )

    async def has_liked(self, user_id: UserId, target_id: UserId) -> bool:
        records = await self._client.select(
            "matches",
            filters={
                "user_id": f"eq.{user_id.value}",
                "matched_user_id": f"eq.{target_id.value}",
                "is_liked": "is.true",
            },
            columns="id",
            limit=1,
        )
        return bool(records)
