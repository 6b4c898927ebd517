# file: GREENCROSS/core/rate_limit.py
from slowapi import Limiter
from slowapi.util import get_remote_address

# ✅ Shared limiter instance; main.py attaches it to app.state and
# routes opt in with @limiter.limit(...)
limiter = Limiter(key_func=get_remote_address)
