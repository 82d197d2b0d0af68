"""Post Composer

Owns the draft for one open post form and runs the submit flow:
validate -> upload media -> create post with the stored key.

Every await is followed by a liveness check. Once close() has been called,
late results are dropped instead of touching the draft.
"""

from __future__ import annotations

import logging
from typing import Any

from composer.application.assist import AIContentAssist, merge_suggestion
from composer.application.categories import CategoryStore
from composer.application.common.exceptions import (
    AIError,
    AssistUnavailableError,
    BackendApiError,
    ComposerClosedError,
    FormValidationError,
    SubmissionInProgressError,
    UploadError,
)
from composer.application.location import LocationSuggester
from composer.application.ports.backend import PostsApiPort
from composer.application.ports.notifier import NotifierPort
from composer.application.ports.place_search import PlaceSearchPort, PlaceSuggestion
from composer.application.upload import UploadClient
from composer.application.validation import validate_file
from composer.domain.auth import AuthContext
from composer.domain.draft import DraftPost
from composer.domain.media import MediaFile

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "content", "location")


class PostComposer:
    def __init__(
        self,
        uploads: UploadClient,
        posts: PostsApiPort,
        categories: CategoryStore,
        notifier: NotifierPort,
        auth: AuthContext | None = None,
        assist: AIContentAssist | None = None,
        place_search: PlaceSearchPort | None = None,
        compensate_orphaned_uploads: bool = True,
        suggest_debounce_seconds: float = 0.3,
    ) -> None:
        self._uploads = uploads
        self._posts = posts
        self._categories = categories
        self._notifier = notifier
        self._auth = auth or AuthContext.anonymous()
        self._assist = assist
        self._compensate = compensate_orphaned_uploads

        self.draft = DraftPost()
        self.available_categories: list[str] = []
        self.location_suggestions: list[PlaceSuggestion] = []

        self._alive = True
        self._submitting = False
        self._released = False
        self._place_search = place_search
        self._location: LocationSuggester | None = None
        if place_search is not None:
            self._location = LocationSuggester(
                place_search,
                self._set_location_suggestions,
                debounce_seconds=suggest_debounce_seconds,
            )

    @property
    def is_open(self) -> bool:
        return self._alive

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    async def open(self) -> list[str]:
        self._ensure_open()
        names = await self._categories.load_all()
        if not self._alive:
            return []
        if self._categories.last_warning:
            self._notifier.error("Could not load categories. You can still add your own.")
        self.available_categories = names
        return names

    def update(self, **fields: Any) -> DraftPost:
        self._ensure_open()
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise TypeError(f"Unknown draft field(s): {', '.join(sorted(unknown))}")
        for name, value in fields.items():
            setattr(self.draft, name, value or "")
        if "location" in fields and self._location is not None:
            self._location.on_input(self.draft.location)
        return self.draft

    async def add_category(self, name: str) -> str:
        self._ensure_open()
        canonical = await self._categories.ensure(name)
        if not self._alive:
            return canonical
        self.draft.categories.add(canonical)
        self.available_categories = self._categories.known()
        return canonical

    def toggle_category(self, name: str) -> bool:
        self._ensure_open()
        return self.draft.categories.toggle(name)

    def choose_location(self, suggestion: PlaceSuggestion) -> str:
        self._ensure_open()
        label = suggestion.label
        if self._location is not None:
            self._location.select(suggestion)
            self._location.on_input(label)
        self.draft.location = label
        self.location_suggestions = []
        return label

    def select_media(self, file: MediaFile | None) -> bool:
        self._ensure_open()
        result = validate_file(file, self._uploads.policy)
        if not result.ok:
            self._notifier.error(result.message)
            return False
        self.draft.media_file = file
        self.draft.media_key = None
        return True

    def remove_media(self) -> None:
        self._ensure_open()
        self.draft.media_file = None
        self.draft.media_key = None

    async def assist(self, brief: str) -> bool:
        """Ask for suggestions; False when nothing was applied."""
        self._ensure_open()
        if self._assist is None:
            raise AssistUnavailableError()
        if not brief.strip():
            self._notifier.error("Describe your post first")
            return False

        try:
            suggestion = await self._assist.generate(brief, self.draft)
        except AIError as e:
            if self._alive:
                self._notifier.error(e.message)
            logger.warning("AI assist failed", extra={"kind": e.kind.value, "error": e.message})
            return False

        if not self._alive:
            return False
        await merge_suggestion(self.draft, suggestion, self._categories, lambda: self._alive)
        if not self._alive:
            return False
        self.available_categories = self._categories.known()
        self._notifier.success("Suggestions applied")
        return not suggestion.is_empty

    async def submit(self) -> dict[str, Any] | None:
        """Publish the draft. Returns the created post, or None if the form closed mid-flight."""
        self._ensure_open()
        if self._submitting:
            raise SubmissionInProgressError()

        errors = self.draft.validate()
        if errors:
            raise FormValidationError(errors)

        self._submitting = True
        try:
            return await self._submit()
        finally:
            self._submitting = False
            if not self._alive:
                await self._release()

    async def close(self) -> None:
        """Drop late results and release the adapters.

        An in-flight submit keeps its connections until it finishes.
        """
        if not self._alive:
            return
        self._alive = False
        if self._location is not None:
            await self._location.close()
        if not self._submitting:
            await self._release()

    async def _release(self) -> None:
        if self._released:
            return
        self._released = True
        await self._uploads.close()
        await self._posts.close()
        if self._assist is not None:
            await self._assist.close()
        if self._place_search is not None:
            await self._place_search.close()
        logger.debug("Composer adapters closed")

    async def _submit(self) -> dict[str, Any] | None:
        uploaded_key: str | None = None

        if self.draft.media_key is None:
            self._notifier.info("Uploading file to cloud storage...")
            try:
                uploaded_key = await self._uploads.upload(self.draft.media_file, self._auth.upload_prefix)
            except UploadError as e:
                if self._alive:
                    self._notifier.error(e.message)
                raise
            if not self._alive:
                await self._discard_upload(uploaded_key)
                return None
            self.draft.media_key = uploaded_key
            self._notifier.success("File uploaded successfully!")

        try:
            post = await self._posts.create_post(self.draft.to_payload())
        except BackendApiError as e:
            logger.warning(
                "Post creation failed after upload",
                extra={"key": self.draft.media_key, "status": e.status},
            )
            if uploaded_key is not None and self._compensate:
                await self._discard_upload(uploaded_key)
                if self._alive:
                    self.draft.media_key = None
            if self._alive:
                self._notifier.error(e.message)
            raise

        if not self._alive:
            return None
        self._notifier.success("Post created successfully!")
        self.draft = DraftPost()
        return post

    async def _discard_upload(self, key: str) -> None:
        if not self._compensate:
            logger.warning("Leaving orphaned upload", extra={"key": key})
            return
        try:
            await self._uploads.delete(key)
        except UploadError as e:
            logger.warning(
                "Could not delete orphaned upload",
                extra={"key": key, "kind": e.kind.value, "error": e.message},
            )

    def _set_location_suggestions(self, suggestions: list[PlaceSuggestion]) -> None:
        if self._alive:
            self.location_suggestions = suggestions

    def _ensure_open(self) -> None:
        if not self._alive:
            raise ComposerClosedError()
