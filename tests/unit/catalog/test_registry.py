"""Tests for the demo registry."""
import string
import threading

import pytest

from design_patterns.catalog import (
    DemoRegistry,
    Participant,
    PatternCategory,
    PatternDemo,
    PatternInfo,
    create_demo,
    load_builtin_demos,
)
from design_patterns.exceptions import DuplicatePatternError, UnknownPatternError

ALL_SLUGS = {
    "abstract-factory", "builder", "factory-method", "prototype", "singleton",
    "adapter", "bridge", "composite", "decorator", "facade", "flyweight", "proxy",
    "chain-of-responsibility", "command", "interpreter", "iterator", "mediator",
    "memento", "observer", "state", "strategy", "template-method", "visitor",
}


def _demo_class(slug="sample", name="Sample"):
    class SampleDemo(PatternDemo):
        info = PatternInfo(
            slug=slug,
            name=name,
            category=PatternCategory.STRUCTURAL,
            intent="Sample intent.",
            participants=[Participant(role="Role", class_name="Sample")],
        )

        def run(self):
            self.emit("sample output")

    return SampleDemo


class TestDemoRegistry:
    """Test registry behaviour."""

    def setup_method(self):
        self.registry = DemoRegistry.get_instance()

    def teardown_method(self):
        self.registry.unregister("sample")

    def test_singleton(self):
        assert DemoRegistry.get_instance() is self.registry

    def test_builtin_demos_registered(self, registry):
        assert set(registry.slugs()) == ALL_SLUGS
        assert len(registry) == 23

    def test_list_infos_sorted_by_category_then_name(self, registry):
        infos = registry.list_infos()
        keys = [(info.category.order, info.name) for info in infos]
        assert keys == sorted(keys)
        assert infos[0].slug == "abstract-factory"
        assert infos[-1].slug == "visitor"

    def test_list_infos_filter(self, registry):
        infos = registry.list_infos(PatternCategory.CREATIONAL)
        assert [info.slug for info in infos] == [
            "abstract-factory", "builder", "factory-method", "prototype", "singleton",
        ]

    def test_list_infos_filter_by_string(self, registry):
        assert len(registry.list_infos("structural")) == 7
        assert len(registry.list_infos("behavioral")) == 11

    def test_register_and_create(self, stream):
        demo_class = _demo_class()
        self.registry.register(demo_class)

        demo = self.registry.create("sample", stream=stream)
        demo.execute()

        assert isinstance(demo, demo_class)
        assert stream.getvalue() == "sample output\n"

    def test_register_same_class_twice_is_idempotent(self):
        demo_class = _demo_class()
        self.registry.register(demo_class)
        self.registry.register(demo_class)
        assert self.registry.get("sample") is demo_class

    def test_duplicate_slug_rejected(self):
        self.registry.register(_demo_class())
        with pytest.raises(DuplicatePatternError):
            self.registry.register(_demo_class())

    def test_register_requires_info(self):
        class Broken(PatternDemo):
            def run(self):
                pass

        with pytest.raises(TypeError):
            self.registry.register(Broken)

    def test_unknown_slug(self, registry):
        with pytest.raises(UnknownPatternError) as exc_info:
            registry.get("monostate")
        assert exc_info.value.slug == "monostate"
        assert "singleton" in exc_info.value.known

    def test_unregister(self):
        self.registry.register(_demo_class())
        assert self.registry.unregister("sample") is True
        assert self.registry.unregister("sample") is False
        assert not self.registry.is_registered("sample")

    def test_list_infos_while_registering_from_another_thread(self, registry):
        letters = string.ascii_lowercase[:10]
        slugs = [f"sample-{a}{b}" for a in letters for b in letters]
        demo_classes = [_demo_class(slug=slug, name=slug.title()) for slug in slugs]
        errors = []

        def register_all():
            for demo_class in demo_classes:
                registry.register(demo_class)

        writer = threading.Thread(target=register_all)
        try:
            writer.start()
            while writer.is_alive():
                try:
                    registry.list_infos()
                except RuntimeError as e:
                    errors.append(e)
            writer.join()

            assert errors == []
            assert len(registry.list_infos()) == 23 + len(slugs)
        finally:
            for slug in slugs:
                registry.unregister(slug)

    def test_load_builtin_demos_after_clear(self):
        self.registry.clear()
        assert len(self.registry) == 0

        load_builtin_demos()

        assert set(self.registry.slugs()) == ALL_SLUGS

    def test_create_demo_helper(self, stream):
        demo = create_demo("factory-method", stream=stream)
        assert demo.info.slug == "factory-method"


class TestPatternDemo:
    """Test the demo base class."""

    def test_emit_lines(self, stream):
        demo = _demo_class()(stream=stream)
        demo.emit_lines(["a", "b"])
        demo.emit()
        assert stream.getvalue() == "a\nb\n\n"

    def test_default_stream_is_stdout(self, capsys):
        _demo_class()().execute()
        assert capsys.readouterr().out == "sample output\n"

    def test_execute_reraises(self, stream):
        class Failing(_demo_class()):
            def run(self):
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            Failing(stream=stream).execute()

    def test_every_builtin_demo_runs(self, registry, stream):
        for slug in registry.slugs():
            registry.create(slug, stream=stream).execute()
        assert stream.getvalue()
