"""Kakao Local adapter."""

from composer.infrastructure.kakao.kakao_client import KakaoPlaceSearchClient

__all__ = ["KakaoPlaceSearchClient"]
