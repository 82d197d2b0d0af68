"""Composer wiring."""

from __future__ import annotations

import logging

from composer.application.assist import AIContentAssist
from composer.application.categories import CategoryStore
from composer.application.compose import PostComposer
from composer.application.ports.notifier import NotifierPort
from composer.application.upload import UploadClient
from composer.application.urls import URLResolver
from composer.domain.auth import AuthContext
from composer.infrastructure.backend import BackendApiClient
from composer.infrastructure.notifications import LoggingNotifier
from composer.infrastructure.relay import RelayHttpClient
from composer.setup.config import ComposerSettings, get_settings

logger = logging.getLogger(__name__)


def build_url_resolver(settings: ComposerSettings | None = None) -> URLResolver:
    settings = settings or get_settings()
    return URLResolver(settings.public_base_url, settings.key_namespace)


def build_upload_client(settings: ComposerSettings | None = None) -> UploadClient:
    settings = settings or get_settings()
    return UploadClient(
        RelayHttpClient(settings.relay_base_url, timeout=settings.upload_timeout_seconds),
        policy=settings.upload_policy(),
        namespace=settings.key_namespace,
    )


def build_composer(
    auth: AuthContext,
    settings: ComposerSettings | None = None,
    notifier: NotifierPort | None = None,
) -> PostComposer:
    """One composer per opened post form."""
    settings = settings or get_settings()
    backend = BackendApiClient(settings.api_base_url, auth=auth, timeout=settings.api_timeout_seconds)

    assist = None
    if settings.openai_api_key:
        from composer.infrastructure.llm import OpenAITextGenerator

        assist = AIContentAssist(
            OpenAITextGenerator(
                model=settings.openai_model,
                api_key=settings.openai_api_key,
                temperature=settings.openai_temperature,
            )
        )
    else:
        logger.info("OPENAI_API_KEY not set, AI assist disabled")

    place_search = None
    if settings.kakao_rest_api_key:
        from composer.infrastructure.kakao import KakaoPlaceSearchClient

        place_search = KakaoPlaceSearchClient(api_key=settings.kakao_rest_api_key)
    else:
        logger.info("KAKAO_REST_API_KEY not set, location suggestions disabled")

    return PostComposer(
        uploads=build_upload_client(settings),
        posts=backend,
        categories=CategoryStore(backend),
        notifier=notifier or LoggingNotifier(),
        auth=auth,
        assist=assist,
        place_search=place_search,
        compensate_orphaned_uploads=settings.compensate_orphaned_uploads,
        suggest_debounce_seconds=settings.suggest_debounce_seconds,
    )
