from .parameter_resolver import ParameterResolver
from .request_parameters import RequestParameters, SDK_CHAT_FIELDS

__all__ = ["ParameterResolver", "RequestParameters", "SDK_CHAT_FIELDS"]
