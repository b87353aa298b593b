from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import settings

# Limits are applied per endpoint with @limiter.limit(...)
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
