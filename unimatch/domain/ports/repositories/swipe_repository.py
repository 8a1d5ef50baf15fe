"""
Swipe Repository Port - Persistence for discovery swipes.
Implementation: unimatch/infrastructure/postgrest/postgrest_swipe_repository.py
"""

from abc import ABC, abstractmethod

from unimatch.domain.entities.swipe import Swipe
from unimatch.domain.value_objects.user_id import UserId


class SwipeRepository(ABC):
    @abstractmethod
    async def save(self, swipe: Swipe) -> None: ...

    @abstractmethod
    async def has_liked(self, user_id: UserId, target_id: UserId) -> bool:
        """True if user_id has a liked swipe on target_id."""
        ...
