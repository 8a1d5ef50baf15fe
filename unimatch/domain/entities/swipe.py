"""
Swipe Entity - One user's like/pass decision on another user's profile.
Stored in the data service's ``matches`` table.
"""

from dataclasses import dataclass

from unimatch.domain.exceptions.validation_error import DomainValidationError
from unimatch.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class Swipe:
    user_id: UserId
    target_id: UserId
    liked: bool
    super_like: bool = False

    def __post_init__(self):
        if self.user_id == self.target_id:
            raise DomainValidationError("You cannot swipe on your own profile")
        if self.super_like and not self.liked:
            raise DomainValidationError("A super like must also be a like")
