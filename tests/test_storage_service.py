# =============================================================================
# tests/test_storage_service.py - Avatar Storage Tests
# =============================================================================
# Tests use a mocked Supabase client to avoid storage calls.
# =============================================================================

from unittest.mock import MagicMock, patch

import pytest

from core.services.storage_service import AvatarStorage
from lib.supabase_client import SupabaseClientError
from lib.utils import file_extension


@pytest.fixture
def storage_client():
    client = MagicMock()
    bucket = client.storage.from_.return_value
    bucket.get_public_url.return_value = "https://cdn.example.com/avatars/x.png"
    with patch("core.services.storage_service.SupabaseClient.get_client", return_value=client):
        yield client


class TestAvatarPath:

    def test_path_layout(self, user_id):
        path = AvatarStorage.avatar_path(user_id, "me.png", timestamp_ms=1700000000000)
        assert path == f"{user_id}/1700000000000.png"

    def test_keeps_last_extension(self, user_id):
        path = AvatarStorage.avatar_path(user_id, "me.final.jpeg", timestamp_ms=1)
        assert path.endswith("/1.jpeg")

    def test_name_without_dot(self):
        assert file_extension("avatar") == "avatar"


class TestUploadAvatar:

    def test_returns_public_url(self, storage_client, user_id):
        url = AvatarStorage.upload_avatar(user_id, "me.png", b"\x89PNG", "image/png")

        assert url == "https://cdn.example.com/avatars/x.png"
        storage_client.storage.from_.assert_called_with("avatars")

        upload_kwargs = storage_client.storage.from_.return_value.upload.call_args.kwargs
        assert upload_kwargs["path"].startswith(f"{user_id}/")
        assert upload_kwargs["path"].endswith(".png")
        assert upload_kwargs["file"] == b"\x89PNG"
        assert upload_kwargs["file_options"] == {"content-type": "image/png"}

    def test_upload_failure_returns_none(self, storage_client, user_id):
        storage_client.storage.from_.return_value.upload.side_effect = Exception("bucket not found")

        assert AvatarStorage.upload_avatar(user_id, "me.png", b"data") is None
        storage_client.storage.from_.return_value.get_public_url.assert_not_called()

    def test_public_url_failure_returns_none(self, storage_client, user_id):
        storage_client.storage.from_.return_value.get_public_url.side_effect = Exception("boom")

        assert AvatarStorage.upload_avatar(user_id, "me.png", b"data") is None

    def test_client_failure_returns_none(self, user_id):
        error = SupabaseClientError("bad key", code="CLIENT_INIT_FAILED")
        with patch("core.services.storage_service.SupabaseClient.get_client", side_effect=error):
            assert AvatarStorage.upload_avatar(user_id, "me.png", b"data", "image/png") is None
