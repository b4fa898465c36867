#!/usr/bin/env python3
"""
Demonstration of an actor performing tasks and checking consequences.

This script shows how a failing task is reported without stopping the
performance, how later consequences are marked ignored, and how fail-fast
changes that.
"""

import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from screenplay import Ability, Actor, Consequence, Performable, Question, step
from screenplay.config import stop_throwing_errors_immediately, throw_errors_immediately
from screenplay.monitoring.logger import setup_logging
from screenplay.performance import get_event_bus
from screenplay.reporting import get_step_event_bus


class ManageABasket(Ability):
    def __init__(self):
        self.items = []


class AddToBasket(Performable):
    def __init__(self, item: str):
        self.item = item

    @step("{0} adds {task.item} to the basket")
    def perform_as(self, actor):
        basket = actor.uses_ability_to(ManageABasket)
        if self.item == "out of stock":
            raise RuntimeError("Item is out of stock")
        basket.items.append(self.item)


class TheBasketSize(Question[int]):
    def answered_by(self, actor):
        return len(actor.ability_to(ManageABasket).items)


class BasketHolds(Consequence):
    def __init__(self, expected: int):
        self.expected = expected

    def evaluate_for(self, actor):
        actual = actor.asks_for(TheBasketSize())
        assert actual == self.expected, f"expected {self.expected} items but found {actual}"

    def __str__(self):
        return f"the basket holds {self.expected} items"


def print_steps():
    bus = get_step_event_bus()
    for recorded in bus.steps:
        print(f"  [{recorded.overall_result.value:>8}] {recorded.description}")
    print(f"  Test result: {bus.test_result.value}")


def demonstrate_continue_on_failure():
    """A failing task is recorded and the performance carries on."""
    print("\n1. Continue On Failure")
    print("=" * 50)

    stop_throwing_errors_immediately()
    get_step_event_bus().test_started("shopping continues after a failure")

    alice = Actor.named("Alice").can(ManageABasket())
    alice.attempts_to(
        AddToBasket("a book"),
        AddToBasket("out of stock"),
        AddToBasket("a pen"),
    )
    alice.remember("basket size", TheBasketSize())
    alice.should(BasketHolds(2))

    print_steps()
    print(f"  Alice remembers {alice.recall('basket size')} items")


def demonstrate_fail_fast():
    """With fail-fast on, the first failure aborts the performance."""
    print("\n2. Fail Fast")
    print("=" * 50)

    throw_errors_immediately()
    get_step_event_bus().test_started("shopping stops at the first failure")

    bob = Actor.named("Bob").can(ManageABasket())
    try:
        bob.attempts_to(AddToBasket("out of stock"), AddToBasket("a book"))
    except RuntimeError as error:
        print(f"  Performance aborted: {error}")
    finally:
        stop_throwing_errors_immediately()

    print_steps()


def main():
    setup_logging(log_level="WARNING", log_format="text")

    print("Screenplay Engine Demo")
    print("=" * 50)

    demonstrate_continue_on_failure()
    demonstrate_fail_fast()

    stats = get_event_bus().get_statistics()
    print(f"\nPerformance events published: {stats['total_events']}")


if __name__ == "__main__":
    main()
