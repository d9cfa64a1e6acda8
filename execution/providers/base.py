"""Provider contract for LLM execution.

This module defines the interface that provider implementations (OpenAI,
Anthropic, Gemini, ...) must implement. Implementations live outside this
package; nothing here performs network I/O.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..types import ExecutionOptions, Model, ProviderResponse, Request


class Provider(ABC):
    """Base abstract class for all LLM providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the provider name (e.g., 'openai', 'anthropic', 'gemini')."""
        pass

    @abstractmethod
    async def execute(
        self,
        request: Request,
        options: Optional[ExecutionOptions] = None,
    ) -> ProviderResponse:
        """Execute a request against this provider.

        Args:
            request: The request holding the model and messages.
            options: Optional per-call options (API key, temperature, ...).

        Returns:
            ProviderResponse with content and optional token usage.

        Raises:
            ProviderError: If the request fails.
        """
        pass

    def supports_model(self, model: Model) -> bool:
        """Check if this provider supports the given model.

        Providers that do not restrict models keep this default.
        """
        return True
