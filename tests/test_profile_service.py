# =============================================================================
# tests/test_profile_service.py - Profile Service Tests
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from core.models.profile import ProfileCreate
from core.services.profile_service import ProfileService
from lib.supabase_client import SupabaseClient, SupabaseClientError


@pytest.fixture
def profile(user_id):
    return ProfileCreate(
        user_id=user_id,
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        pinecone_index="user-550e8400e29b41d4a716",
    )


class TestCreateProfile:

    def test_inserts_row(self, profile):
        with patch.object(SupabaseClient, "insert_profile", return_value={"user_id": profile.user_id}) as insert:
            row = ProfileService.create_profile(profile)

        insert.assert_called_once_with(profile.model_dump())
        assert row == {"user_id": profile.user_id}

    def test_failure_is_swallowed(self, profile):
        error = SupabaseClientError("duplicate key value", code="INSERT_PROFILE_FAILED")
        with patch.object(SupabaseClient, "insert_profile", side_effect=error):
            assert ProfileService.create_profile(profile) is None


class TestGetProfile:

    def test_returns_model(self, user_id):
        row = {"user_id": user_id, "first_name": "Ada", "last_name": "Lovelace"}
        with patch.object(SupabaseClient, "fetch_profile", return_value=row):
            profile = ProfileService.get_profile(user_id)

        assert profile.display_name == "Ada Lovelace"

    def test_missing_row(self, user_id):
        with patch.object(SupabaseClient, "fetch_profile", return_value=None):
            assert ProfileService.get_profile(user_id) is None

    def test_query_error(self, user_id):
        with patch.object(SupabaseClient, "fetch_profile", side_effect=SupabaseClientError("timeout")):
            assert ProfileService.get_profile(user_id) is None


class TestSupabaseProfileQueries:
    """Query construction against a mocked postgrest chain."""

    @pytest.fixture
    def client(self):
        client = MagicMock()
        with patch.object(SupabaseClient, "get_client", return_value=client):
            yield client

    def test_fetch_profile_by_exact_key(self, client, user_id):
        chain = client.table.return_value.select.return_value.eq.return_value.maybe_single.return_value
        chain.execute.return_value = MagicMock(data={"user_id": user_id})

        assert SupabaseClient.fetch_profile(user_id) == {"user_id": user_id}
        client.table.assert_called_once_with("profiles")
        client.table.return_value.select.return_value.eq.assert_called_once_with("user_id", user_id)

    def test_fetch_profile_missing_row(self, client, user_id):
        chain = client.table.return_value.select.return_value.eq.return_value.maybe_single.return_value
        chain.execute.return_value = None

        assert SupabaseClient.fetch_profile(user_id) is None

    def test_insert_error_wrapped(self, client):
        client.table.return_value.insert.return_value.execute.side_effect = Exception("23505")

        with pytest.raises(SupabaseClientError) as exc_info:
            SupabaseClient.insert_profile({"user_id": "u-1"})

        assert exc_info.value.code == "INSERT_PROFILE_FAILED"

    def test_profiles_without_index(self, client):
        chain = client.table.return_value.select.return_value.is_.return_value.limit.return_value
        chain.execute.return_value = MagicMock(data=[{"user_id": "u-1"}])

        assert SupabaseClient.fetch_profiles_without_index(5) == [{"user_id": "u-1"}]
        client.table.return_value.select.return_value.is_.assert_called_once_with("pinecone_index", "null")
