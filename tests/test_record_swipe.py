"""
Unit tests for swipes and mutual-match detection.

Run with: pytest tests/test_record_swipe.py -v
"""

import asyncio

import pytest

from unimatch.application.commands.swipes import RecordSwipeCommand, RecordSwipeHandler
from unimatch.domain.entities.swipe import Swipe
from unimatch.domain.exceptions import DomainValidationError


def swipe(handler, user, target, liked=True, super_like=False):
    command = RecordSwipeCommand(swipe=Swipe(user, target, liked, super_like))
    return asyncio.run(handler.execute(command))


@pytest.fixture()
def handler(swipes, conversations):
    return RecordSwipeHandler(swipes, conversations)


class TestRecordSwipe:
    def test_one_sided_like_is_not_a_match(self, handler, swipes, conversations, alice, bob):
        result = swipe(handler, alice, bob)

        assert result.matched is False
        assert result.conversation_id is None
        assert len(swipes.swipes) == 1
        assert conversations.created == []

    def test_mutual_like_opens_one_conversation(self, handler, conversations, alice, bob):
        swipe(handler, alice, bob)
        result = swipe(handler, bob, alice)

        assert result.matched is True
        assert len(conversations.created) == 1
        user1, user2, conversation_id = conversations.created[0]
        assert (user1, user2) == (bob, alice)
        assert result.conversation_id == conversation_id

    def test_pass_never_matches(self, handler, conversations, alice, bob):
        swipe(handler, alice, bob)
        result = swipe(handler, bob, alice, liked=False)

        assert result.matched is False
        assert conversations.created == []

    def test_like_after_pass_is_not_a_match(self, handler, conversations, alice, bob):
        swipe(handler, alice, bob, liked=False)
        result = swipe(handler, bob, alice)

        assert result.matched is False
        assert conversations.created == []


class TestSwipeEntity:
    def test_self_swipe_rejected(self, alice):
        with pytest.raises(DomainValidationError):
            Swipe(alice, alice, liked=True)

    def test_super_like_requires_like(self, alice, bob):
        with pytest.raises(DomainValidationError):
            Swipe(alice, bob, liked=False, super_like=True)
