from slowapi import Limiter
from slowapi.util import get_remote_address

from receipt_processor import config

limiter = Limiter(key_func=get_remote_address)


def process_rate_limit() -> str:
    # Read on every request so the limit follows config changes
    return config.PROCESS_RATE_LIMIT
