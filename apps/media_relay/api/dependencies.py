from fastapi import Request

from media_relay.services.relay import RelayService


def get_relay_service(request: Request) -> RelayService:
    return request.app.state.relay_service
