"""Pytest configuration and fixtures for execution package tests."""

import pytest
from typing import Any, List, Tuple

from execution.model_registry import ModelRegistry, reset_model_registry
from execution.types import Message, Role


class RecordingLogger:
    """Logger that records (level, message, args) for every call."""

    def __init__(self, name: str = "recording"):
        self.name = name
        self.calls: List[Tuple[str, str, Tuple[Any, ...]]] = []

    def debug(self, message, *args):
        self.calls.append(("debug", message, args))

    def info(self, message, *args):
        self.calls.append(("info", message, args))

    def warn(self, message, *args):
        self.calls.append(("warn", message, args))

    def error(self, message, *args):
        self.calls.append(("error", message, args))

    def verbose(self, message, *args):
        self.calls.append(("verbose", message, args))

    def silly(self, message, *args):
        self.calls.append(("silly", message, args))

    def messages(self, level: str) -> List[str]:
        return [message for lvl, message, _ in self.calls if lvl == level]


@pytest.fixture(autouse=True)
def clean_global_registry():
    """Give every test a fresh global model registry."""
    reset_model_registry()
    yield
    reset_model_registry()


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Logger capturing everything written to it."""
    return RecordingLogger()


@pytest.fixture
def registry(recording_logger) -> ModelRegistry:
    """Private registry wired to the recording logger."""
    return ModelRegistry(recording_logger)


@pytest.fixture
def sample_messages() -> List[Message]:
    """Sample conversation for request tests."""
    return [
        Message(role=Role.SYSTEM, content="You are helpful"),
        Message(role=Role.USER, content="What is the capital of France?"),
        Message(role=Role.ASSISTANT, content="The capital of France is Paris."),
    ]
