"""Core types for LLM execution across providers.

These are plain value types passed between callers and provider
implementations. None of them perform I/O.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .config import get_settings


# ============================================================================
# Role and Model Types
# ============================================================================

class Role(str, Enum):
    """Message role in a conversation."""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    DEVELOPER = "developer"
    TOOL = "tool"


class PersonaRole(str, Enum):
    """Role that carries system/instruction content for a model."""
    SYSTEM = "system"
    DEVELOPER = "developer"


class TokenizerEncoding(str, Enum):
    """Tokenizer encoding to use for token counting."""
    GPT_4O = "gpt-4o"
    CL100K_BASE = "cl100k_base"
    O200K_BASE = "o200k_base"


# Model identifiers are free-form strings
Model = str


# ============================================================================
# Message Types
# ============================================================================

@dataclass
class Message:
    """A message in a conversation."""

    role: Union[Role, str]
    content: Union[str, List[str], None]
    name: Optional[str] = None


@dataclass
class ToolCallFunction:
    """Function invocation requested by the assistant."""

    name: str
    arguments: str


@dataclass
class ToolCall:
    """Tool call made by the assistant."""

    id: str
    function: ToolCallFunction
    type: str = "function"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the OpenAI-compatible dictionary shape."""
        return {
            "id": self.id,
            "type": self.type,
            "function": {
                "name": self.function.name,
                "arguments": self.function.arguments,
            },
        }


@dataclass
class ConversationMessage:
    """Message in a conversation (compatible with OpenAI format)."""

    role: Union[Role, str]
    content: Optional[str]
    name: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None
    tool_call_id: Optional[str] = None


# ============================================================================
# Request Types
# ============================================================================

@dataclass
class Request:
    """An LLM request: a model plus an ordered list of messages."""

    model: Model
    messages: List[Message] = field(default_factory=list)
    response_format: Any = None
    validator: Any = None

    def add_message(self, message: Message) -> None:
        """Append a message to the end of the conversation."""
        self.messages.append(message)


def create_request(model: Optional[Model] = None) -> Request:
    """Create a new, empty request.

    Args:
        model: Model identifier. Defaults to the configured default model.

    Returns:
        A Request with no messages.
    """
    if model is None:
        model = get_settings().default_model
    return Request(model=model)


# ============================================================================
# Provider Types
# ============================================================================

@dataclass
class TokenUsage:
    """Token counts reported by a provider."""

    input_tokens: int
    output_tokens: int

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


@dataclass
class ProviderResponse:
    """Response from an LLM provider."""

    content: str
    model: str
    usage: Optional[TokenUsage] = None
    tool_calls: Optional[List[ToolCall]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        result: Dict[str, Any] = {
            "content": self.content,
            "model": self.model,
        }
        if self.usage is not None:
            result["usage"] = {
                "input_tokens": self.usage.input_tokens,
                "output_tokens": self.usage.output_tokens,
            }
        if self.tool_calls is not None:
            result["tool_calls"] = [call.to_dict() for call in self.tool_calls]
        return result


@dataclass
class StreamChunk:
    """A chunk from a streaming response."""

    content: Optional[str] = None
    finish_reason: Optional[str] = None
    tool_calls: Optional[List[ToolCall]] = None


class ExecutionOptions(BaseModel):
    """Options for a single execution."""
    api_key: Optional[str] = None
    model: Optional[str] = None
    temperature: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=2.0,
        description="Sampling temperature (0.0 to 2.0)"
    )
    max_tokens: Optional[int] = Field(
        default=None,
        ge=1,
        description="Maximum tokens to generate"
    )
    timeout: Optional[int] = Field(
        default=None,
        ge=0,
        description="Request timeout in milliseconds"
    )
    retries: Optional[int] = Field(
        default=None,
        ge=0,
        description="Number of retries a provider may attempt"
    )


# ============================================================================
# Model Configuration
# ============================================================================

@dataclass
class ModelConfig:
    """Configuration for a model or model family.

    A config matches model identifiers either by ``exact_match`` or by
    ``pattern``. String patterns are compiled case-insensitively; compiled
    patterns keep their own flags.
    """

    persona_role: Union[PersonaRole, str]
    encoding: Union[TokenizerEncoding, str]
    pattern: Optional[Union[str, re.Pattern]] = None
    exact_match: Optional[str] = None
    supports_tool_calls: Optional[bool] = None
    max_tokens: Optional[int] = None
    family: Optional[str] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if isinstance(self.pattern, str):
            self.pattern = re.compile(self.pattern, re.IGNORECASE)

    def matches(self, model: Model) -> bool:
        """Check whether this config applies to a model identifier."""
        if self.exact_match and self.exact_match == model:
            return True
        if self.pattern is not None and self.pattern.search(model):
            return True
        return False
