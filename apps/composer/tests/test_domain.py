"""Domain model tests."""

from __future__ import annotations

import pytest

from composer.domain.auth import AuthContext
from composer.domain.categories import CategorySelection, normalize_category_name
from composer.domain.draft import DraftPost
from composer.domain.media import MediaFile


class TestCategoryNames:
    """Normalization and selection."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("  ski  TRIP ", "Ski Trip"),
            ("backcountry", "Backcountry"),
            ("APRES\tski", "Apres Ski"),
            ("   ", ""),
        ],
    )
    def test_normalize(self, raw: str, expected: str) -> None:
        assert normalize_category_name(raw) == expected

    def test_selection_is_case_insensitive_and_ordered(self) -> None:
        selection = CategorySelection(["ski trip", "Powder"])
        assert not selection.add("SKI TRIP")
        assert selection.add("groomers")
        assert selection.as_list() == ["Ski Trip", "Powder", "Groomers"]
        assert "powder" in selection

    def test_toggle(self) -> None:
        selection = CategorySelection()
        assert selection.toggle("powder") is True
        assert selection.toggle("POWDER") is False
        assert len(selection) == 0


class TestDraftPost:
    """DraftPost validation and payload."""

    def test_empty_draft_errors(self) -> None:
        errors = DraftPost().validate()
        assert set(errors) == {"title", "content", "image"}

    def test_length_rules(self) -> None:
        draft = DraftPost(title="ab", content="too short")
        errors = draft.validate()
        assert errors["title"] == "Title must be at least 3 characters"
        assert errors["content"] == "Description must be at least 10 characters"

        draft.title = "x" * 101
        assert draft.validate()["title"] == "Title must be less than 100 characters"

    def test_valid_with_media(self) -> None:
        draft = DraftPost(
            title="First chair",
            content="Bluebird day with fresh corduroy.",
            media_file=MediaFile("a.jpg", "image/jpeg", b"1"),
        )
        assert draft.validate() == {}

    def test_payload_carries_key(self) -> None:
        draft = DraftPost(title=" First chair ", content="Bluebird day with fresh corduroy.", media_key="k.jpg")
        draft.categories.add("skiing")
        assert draft.to_payload() == {
            "title": "First chair",
            "content": "Bluebird day with fresh corduroy.",
            "categories": ["Skiing"],
            "location": "",
            "image": "k.jpg",
        }

    def test_snapshot_uses_description(self) -> None:
        snapshot = DraftPost(content="hello").snapshot()
        assert snapshot["description"] == "hello"


class TestAuthContext:
    """AuthContext"""

    def test_upload_prefix_defaults_to_post(self) -> None:
        assert AuthContext.anonymous().upload_prefix == "post"
        assert AuthContext(token="t", user_id="u1").upload_prefix == "u1"

    def test_from_store_without_token(self) -> None:
        assert not AuthContext.from_store({"userId": "u1"}).is_authenticated

    def test_from_store(self) -> None:
        auth = AuthContext.from_store({"authToken": "t", "userId": "u1", "username": "shred"})
        assert auth.is_authenticated
        assert auth.user_id == "u1"
        assert auth.email is None


class TestMediaFile:
    """MediaFile"""

    def test_from_path(self, tmp_path) -> None:
        path = tmp_path / "clip.MP4"
        path.write_bytes(b"0000")
        media = MediaFile.from_path(path)
        assert media.size == 4
        assert media.extension == "mp4"
        assert media.content_type == "video/mp4"
