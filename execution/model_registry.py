"""Model Registry for resolving model identifiers to configurations.

The registry holds an ordered list of :class:`ModelConfig` rules. Each
registration is placed in front of the existing rules, so the most
recently registered rule that matches a model identifier wins. Lookups
are memoized per identifier until the rule set changes.
"""

import re
import threading
from typing import Dict, List, Optional

from .exceptions import ConfigurationError
from .logger import DEFAULT_LOGGER, Logger, wrap_logger
from .types import Model, ModelConfig, PersonaRole, TokenizerEncoding


def _default_configs() -> List[ModelConfig]:
    """Build the default configs in registration order.

    Registration prepends, so the fallback comes first here and is
    checked last.
    """
    return [
        ModelConfig(
            pattern=re.compile(r".*"),
            persona_role=PersonaRole.SYSTEM,
            encoding=TokenizerEncoding.GPT_4O,
            supports_tool_calls=True,
            family="unknown",
            description="Default fallback configuration",
        ),
        ModelConfig(
            pattern=re.compile(r"^claude", re.IGNORECASE),
            persona_role=PersonaRole.SYSTEM,
            encoding=TokenizerEncoding.CL100K_BASE,
            supports_tool_calls=True,
            family="claude",
            description="Claude family models",
        ),
        ModelConfig(
            pattern=re.compile(r"^o\d+", re.IGNORECASE),
            persona_role=PersonaRole.DEVELOPER,
            encoding=TokenizerEncoding.GPT_4O,
            supports_tool_calls=True,
            family="o-series",
            description="O-series reasoning models",
        ),
        ModelConfig(
            pattern=re.compile(r"^gpt-4", re.IGNORECASE),
            persona_role=PersonaRole.SYSTEM,
            encoding=TokenizerEncoding.GPT_4O,
            supports_tool_calls=True,
            family="gpt-4",
            description="GPT-4 family models",
        ),
        ModelConfig(
            pattern=re.compile(r"^gemini", re.IGNORECASE),
            persona_role=PersonaRole.SYSTEM,
            encoding=TokenizerEncoding.CL100K_BASE,
            supports_tool_calls=True,
            family="gemini",
            description="Gemini family models",
        ),
    ]


class ModelRegistry:
    """Registry for model configurations.

    A fresh registry knows the Gemini, GPT-4, O-series and Claude families
    and falls back to a catch-all config for anything else. Custom configs
    registered later take precedence over all earlier ones.

    All methods are safe to call from multiple threads.

    Resolved configs are cached per model identifier and the cache only
    empties on ``register()``, ``reset()`` or ``clear_cache()``. Long-lived
    callers resolving an unbounded set of identifiers should call
    ``clear_cache()`` periodically.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        """Initialize the registry with the default configurations.

        Args:
            logger: Optional logger; defaults to DEFAULT_LOGGER.
        """
        self._configs: List[ModelConfig] = []
        self._cache: Dict[str, ModelConfig] = {}
        self._lock = threading.RLock()
        self._logger = wrap_logger(logger or DEFAULT_LOGGER, "ModelRegistry")

        self._register_defaults()

    def _register_defaults(self) -> None:
        for config in _default_configs():
            self.register(config)
        self._logger.debug("Registered default model configurations")

    def register(self, config: ModelConfig) -> None:
        """Register a model configuration.

        The config is checked before any other config registered so far.

        Args:
            config: The config to register.

        Raises:
            ConfigurationError: If the config has neither or both of
                ``pattern`` and ``exact_match``.
        """
        if config.pattern is None and not config.exact_match:
            raise ConfigurationError(
                "Model config must have either pattern or exact_match"
            )
        if config.pattern is not None and config.exact_match:
            raise ConfigurationError(
                "Model config must not have both pattern and exact_match"
            )

        with self._lock:
            self._configs.insert(0, config)
            self._cache.clear()

        self._logger.debug(
            "Registered model config",
            {
                "family": config.family,
                "pattern": config.pattern.pattern if config.pattern is not None else None,
                "exact_match": config.exact_match,
            },
        )

    def get_config(self, model: Model) -> ModelConfig:
        """Get the configuration for a model.

        Repeated lookups of the same identifier return the same object
        until the rule set changes.

        Args:
            model: Model identifier.

        Returns:
            The first matching config in priority order.

        Raises:
            ConfigurationError: If no config matches the model.
        """
        with self._lock:
            cached = self._cache.get(model)
            if cached is not None:
                return cached

            for config in self._configs:
                if config.matches(model):
                    self._cache[model] = config
                    return config

        raise ConfigurationError(f"No configuration found for model: {model}")

    def get_persona_role(self, model: Model) -> PersonaRole:
        """Get the persona role for a model."""
        return self.get_config(model).persona_role

    def get_encoding(self, model: Model) -> TokenizerEncoding:
        """Get the tokenizer encoding for a model."""
        return self.get_config(model).encoding

    def supports_tool_calls(self, model: Model) -> bool:
        """Check if a model supports tool calls.

        Configs that leave ``supports_tool_calls`` unset are treated as
        supporting them.
        """
        supported = self.get_config(model).supports_tool_calls
        return True if supported is None else supported

    def get_family(self, model: Model) -> Optional[str]:
        """Get the model family, or None if the config has none."""
        return self.get_config(model).family

    def get_max_tokens(self, model: Model) -> Optional[int]:
        """Get the token limit for a model, or None if not configured."""
        return self.get_config(model).max_tokens

    def reset(self) -> None:
        """Clear all registered configs and restore the defaults."""
        with self._lock:
            self._configs = []
            self._cache.clear()
            self._register_defaults()
        self._logger.debug("Reset model configurations to defaults")

    def clear_cache(self) -> None:
        """Clear the lookup cache. Registered configs are kept."""
        with self._lock:
            self._cache.clear()
        self._logger.debug("Cleared model configuration cache")

    def get_all_configs(self) -> List[ModelConfig]:
        """Get all registered configs in priority order.

        Returns:
            A copy of the config list; changing it does not affect the
            registry.
        """
        with self._lock:
            return list(self._configs)

    def __len__(self) -> int:
        with self._lock:
            return len(self._configs)


# Global registry instance
_registry: Optional[ModelRegistry] = None
_registry_lock = threading.Lock()


def get_model_registry(logger: Optional[Logger] = None) -> ModelRegistry:
    """Get the global model registry instance.

    Creates the registry if it doesn't exist. ``logger`` is only used
    when the registry is created by this call.

    Returns:
        The global ModelRegistry instance.
    """
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = ModelRegistry(logger)
        return _registry


def reset_model_registry() -> None:
    """Reset the global registry (useful for testing)."""
    global _registry
    with _registry_lock:
        _registry = None


def get_persona_role(model: Model) -> PersonaRole:
    """Get the persona role for a model from the global registry."""
    return get_model_registry().get_persona_role(model)


def get_encoding(model: Model) -> TokenizerEncoding:
    """Get the tokenizer encoding for a model from the global registry."""
    return get_model_registry().get_encoding(model)


def supports_tool_calls(model: Model) -> bool:
    """Check tool call support for a model in the global registry."""
    return get_model_registry().supports_tool_calls(model)


def get_family(model: Model) -> Optional[str]:
    """Get the model family from the global registry."""
    return get_model_registry().get_family(model)


get_model_family = get_family


def configure_model(config: ModelConfig) -> None:
    """Register a custom model config with the global registry."""
    get_model_registry().register(config)
