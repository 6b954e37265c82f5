"""Unit tests for the ownership policy."""

import pytest

from devconnector.domain.error import UnauthorizedError, UnauthorizedReason
from devconnector.domain.service.ownership_policy import is_owner, require_owner
from tests.conftest import make_post, make_profile, make_user, principal_of


class TestOwnershipPolicy:
    """Tests for is_owner and require_owner."""

    def test_post_owned_by_author(self):
        author, other = make_user("Ann"), make_user("Bob")
        post = make_post(author)

        assert is_owner(principal_of(author), post)
        assert not is_owner(principal_of(other), post)

    def test_profile_owned_by_user(self):
        user = make_user()

        assert is_owner(principal_of(user), make_profile(user))

    def test_require_owner_passes_for_owner(self):
        author = make_user()

        require_owner(principal_of(author), make_post(author), "post")

    def test_require_owner_rejects_others(self):
        author, other = make_user("Ann"), make_user("Bob")

        with pytest.raises(UnauthorizedError) as exc_info:
            require_owner(principal_of(other), make_post(author), "post")

        assert exc_info.value.reason == UnauthorizedReason.NOT_OWNER
