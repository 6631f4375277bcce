"""Provider error taxonomy public surface.

Concrete types live under ``compat_providers.base.errors_parts``; import from
here for a stable path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.classification import classify_exception

__all__ = ["ErrorCode", "ProviderError", "classify_exception"]
