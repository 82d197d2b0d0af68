from media_relay.services.relay import RelayService, UploadResult

__all__ = ["RelayService", "UploadResult"]
