"""Error taxonomy components (one type per module)."""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .classification import classify_exception

__all__ = ["ErrorCode", "ProviderError", "classify_exception"]
