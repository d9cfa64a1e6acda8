"""Execution package.

Core interfaces and types for LLM execution providers, plus the model
registry that maps model identifiers to their configuration. This package
contains no provider-specific dependencies.
"""

from .exceptions import ExecutionError, ConfigurationError, ProviderError
from .logger import (
    DEFAULT_LOGGER,
    LIBRARY_NAME,
    NOOP_LOGGER,
    Logger,
    NoopLogger,
    StdlibLogger,
    WrappedLogger,
    wrap_logger,
)
from .types import (
    Role,
    Model,
    PersonaRole,
    TokenizerEncoding,
    Message,
    ToolCall,
    ToolCallFunction,
    ConversationMessage,
    Request,
    create_request,
    TokenUsage,
    ProviderResponse,
    StreamChunk,
    ExecutionOptions,
    ModelConfig,
)
from .providers import Provider
from .model_registry import (
    ModelRegistry,
    get_model_registry,
    reset_model_registry,
    get_persona_role,
    get_encoding,
    supports_tool_calls,
    get_family,
    get_model_family,
    configure_model,
)

VERSION = "0.0.1"
__version__ = VERSION

__all__ = [
    "ExecutionError",
    "ConfigurationError",
    "ProviderError",
    "DEFAULT_LOGGER",
    "LIBRARY_NAME",
    "NOOP_LOGGER",
    "Logger",
    "NoopLogger",
    "StdlibLogger",
    "WrappedLogger",
    "wrap_logger",
    "Role",
    "Model",
    "PersonaRole",
    "TokenizerEncoding",
    "Message",
    "ToolCall",
    "ToolCallFunction",
    "ConversationMessage",
    "Request",
    "create_request",
    "TokenUsage",
    "ProviderResponse",
    "StreamChunk",
    "ExecutionOptions",
    "ModelConfig",
    "Provider",
    "ModelRegistry",
    "get_model_registry",
    "reset_model_registry",
    "get_persona_role",
    "get_encoding",
    "supports_tool_calls",
    "get_family",
    "get_model_family",
    "configure_model",
    "VERSION",
]
