"""Tests for the in-memory strategy registries."""

import threading
from concurrent.futures import ThreadPoolExecutor

from warden_oauth2.domain.strategy.model import StrategyDescriptor
from warden_oauth2.infrastructure.strategy.registry import (
    InMemoryDispatchRegistry,
    InMemoryResolverTable,
    InMemoryStrategyTypeRegistry,
)


class TestInMemoryStrategyTypeRegistry:
    def test_get_or_create_is_idempotent(self) -> None:
        registry = InMemoryStrategyTypeRegistry()

        first = registry.get_or_create("Twitter", "twitter")
        second = registry.get_or_create("Twitter", "other")

        assert first is second
        assert first.keyword == "twitter"

    def test_creates_empty_descriptor(self) -> None:
        descriptor = InMemoryStrategyTypeRegistry().get_or_create("Twitter")

        assert descriptor.name == "Twitter"
        assert not descriptor.is_configured
        assert not descriptor.has_resolver

    def test_get_does_not_create(self) -> None:
        registry = InMemoryStrategyTypeRegistry()

        assert registry.get("Twitter") is None
        assert registry.names() == []

    def test_names_lists_created_descriptors(self) -> None:
        registry = InMemoryStrategyTypeRegistry()
        registry.get_or_create("Twitter")
        registry.get_or_create("Github")

        assert registry.names() == ["Twitter", "Github"]

    def test_concurrent_creation_has_single_winner(self) -> None:
        registry = InMemoryStrategyTypeRegistry()
        barrier = threading.Barrier(8)

        def create(_: int) -> StrategyDescriptor:
            barrier.wait()
            return registry.get_or_create("Twitter")

        with ThreadPoolExecutor(max_workers=8) as pool:
            descriptors = list(pool.map(create, range(8)))

        assert len({id(d) for d in descriptors}) == 1


class TestInMemoryDispatchRegistry:
    def test_first_registration_wins(self) -> None:
        registry = InMemoryDispatchRegistry()
        first = StrategyDescriptor("Twitter")
        second = StrategyDescriptor("Other")

        assert registry.register_if_absent("twitter_oauth2", first) is True
        assert registry.register_if_absent("twitter_oauth2", second) is False
        assert registry.lookup("twitter_oauth2") is first

    def test_reregistering_same_descriptor_returns_false(self) -> None:
        registry = InMemoryDispatchRegistry()
        descriptor = StrategyDescriptor("Twitter")
        registry.register_if_absent("twitter_oauth2", descriptor)

        assert registry.register_if_absent("twitter_oauth2", descriptor) is False

    def test_lookup_unknown_key_returns_none(self) -> None:
        registry = InMemoryDispatchRegistry()

        assert registry.lookup("twitter_oauth2") is None
        assert not registry.is_available("twitter_oauth2")

    def test_initial_strategies(self) -> None:
        descriptor = StrategyDescriptor("Twitter")
        registry = InMemoryDispatchRegistry({"twitter_oauth2": descriptor})

        assert registry.is_available("twitter_oauth2")
        assert registry.available_strategies() == ["twitter_oauth2"]

    def test_concurrent_registration_keeps_one_descriptor(self) -> None:
        registry = InMemoryDispatchRegistry()
        candidates = [StrategyDescriptor(f"Candidate{i}") for i in range(16)]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(
                pool.map(lambda d: registry.register_if_absent("twitter_oauth2", d), candidates)
            )

        assert results.count(True) == 1
        winner = candidates[results.index(True)]
        assert registry.lookup("twitter_oauth2") is winner


class TestInMemoryResolverTable:
    def test_register_and_get(self) -> None:
        table = InMemoryResolverTable()

        def resolver(token: str) -> None:
            return None

        table.register("twitter", resolver)

        assert table.get("twitter") is resolver
        assert table.get("github") is None

    def test_register_overwrites(self) -> None:
        table = InMemoryResolverTable()

        def first(token: str) -> None:
            return None

        def second(token: str) -> None:
            return None

        table.register("twitter", first)
        table.register("twitter", second)

        assert table.get("twitter") is second
