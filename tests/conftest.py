"""Shared fixtures for the pattern catalog test suite."""
import io
import logging

import pytest

from design_patterns.catalog import DemoRegistry, load_builtin_demos
from design_patterns.config import reset_config_manager
from design_patterns.creational.singleton import LoadBalancer


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Reset singletons and environment overrides around every test."""
    for name in ("GOF_LOG_LEVEL", "GOF_LOG_FORMAT", "GOF_RANDOM_SEED", "GOF_OUTPUT_FORMAT", "GOF_CONFIG_FILE"):
        monkeypatch.delenv(name, raising=False)
    LoadBalancer.reset_instance()
    reset_config_manager()
    load_builtin_demos()
    yield
    LoadBalancer.reset_instance()
    reset_config_manager()
    load_builtin_demos()
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.WARNING)


@pytest.fixture
def stream():
    """In-memory destination for demo output."""
    return io.StringIO()


@pytest.fixture
def registry():
    """The global demo registry with every built-in demo loaded."""
    return load_builtin_demos()


@pytest.fixture
def run_demo(stream):
    """Run a demo by slug and return its output lines."""
    def _run(slug, settings=None):
        demo = DemoRegistry.get_instance().create(slug, settings=settings, stream=stream)
        demo.execute()
        return stream.getvalue().splitlines()
    return _run
