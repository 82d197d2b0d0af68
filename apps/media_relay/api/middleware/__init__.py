from media_relay.api.middleware.cors import CORSHeadersMiddleware

__all__ = ["CORSHeadersMiddleware"]
