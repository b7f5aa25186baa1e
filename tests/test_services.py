"""Unit tests for the ServiceContainer registry lookup."""

from __future__ import annotations

import threading
import time

import pytest

from mailer_core.services import ServiceContainer, ServiceNotFoundError


def test_service_registration_respects_singleton_vs_factory() -> None:
    container = ServiceContainer()
    counters = {"singleton": 0, "factory": 0}

    def singleton_provider(_: ServiceContainer):
        counters["singleton"] += 1
        return object()

    def factory_provider(_: ServiceContainer):
        counters["factory"] += 1
        return {"call": counters["factory"]}

    container.register("singleton", singleton_provider)
    container.register("factory", factory_provider, singleton=False)

    first_singleton = container.get("singleton")
    assert first_singleton is container.get("singleton")
    assert counters["singleton"] == 1

    first_factory = container.get("factory")
    second_factory = container.get("factory")
    assert first_factory is not second_factory
    assert counters["factory"] == 2


def test_set_registers_existing_instance() -> None:
    container = ServiceContainer()
    instance = object()
    container.set("ready", instance)

    assert container.has("ready")
    assert not container.has("other")
    assert container.get("ready") is instance


def test_duplicate_registration_is_rejected() -> None:
    container = ServiceContainer()
    container.set("name", 1)
    with pytest.raises(ValueError):
        container.set("name", 2)


def test_reentrant_initialization_raises() -> None:
    container = ServiceContainer()

    def provider(c: ServiceContainer):
        return c.get("reentrant")

    container.register("reentrant", provider)
    with pytest.raises(RuntimeError):
        container.get("reentrant")


def test_get_unregistered_service_errors() -> None:
    container = ServiceContainer()
    with pytest.raises(ServiceNotFoundError):
        container.get("missing")
    with pytest.raises(KeyError):
        container.get("missing")


def test_concurrent_first_get_builds_singleton_once() -> None:
    container = ServiceContainer()
    calls: list[int] = []

    def slow_provider(_: ServiceContainer):
        calls.append(1)
        time.sleep(0.05)
        return object()

    container.register("slow", slow_provider)
    barrier = threading.Barrier(4)
    results: list[object] = []
    errors: list[BaseException] = []

    def worker() -> None:
        barrier.wait()
        try:
            results.append(container.get("slow"))
        except Exception as exc:  # pragma: no cover - failure is asserted below
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert len(calls) == 1
    assert len({id(result) for result in results}) == 1
