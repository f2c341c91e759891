from .context import MongoContext, redact_url
from .settings import MongoSettings

__all__ = [
    'MongoContext',
    'MongoSettings',
    'redact_url',
]
