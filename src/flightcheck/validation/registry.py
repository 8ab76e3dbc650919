"""Thread-safe, ordered registry of booking rules"""

import logging
from collections.abc import Callable, Iterator
from threading import Lock

from flightcheck.core.errors import RuleRegistryError
from flightcheck.core.types import RuleContext

logger = logging.getLogger(__name__)

RuleFn = Callable[[RuleContext], bool]


class RuleRegistry:
    """
    Ordered registry of named rule predicates.

    Rules are evaluated in registration order. Order only decides the order
    in which violations are reported, never whether a booking is accepted.
    All mutations are protected by a lock.
    """

    def __init__(self) -> None:
        self._rules: dict[str, RuleFn] = {}
        self._lock = Lock()

    def register(self, name: str) -> Callable[[RuleFn], RuleFn]:
        """
        Register a rule predicate.

        Usage:
            @rules.register("airports")
            def airports_valid(ctx: RuleContext) -> bool:
                ...

        Args:
            name: Rule name reported in violations

        Returns:
            Decorator function

        Raises:
            RuleRegistryError: If a rule with that name is already registered
        """

        def decorator(func: RuleFn) -> RuleFn:
            with self._lock:
                if name in self._rules:
                    raise RuleRegistryError(f"Rule '{name}' already registered")
                self._rules[name] = func
                logger.debug(
                    f"Registered rule '{name}'",
                    extra={"rule_name": name},
                )
            return func

        return decorator

    def get(self, name: str) -> RuleFn:
        """
        Get rule by name (thread-safe read).

        Raises:
            RuleRegistryError: If rule is not registered
        """
        with self._lock:
            if name not in self._rules:
                raise RuleRegistryError(
                    f"Rule '{name}' not registered. Available: {list(self._rules.keys())}"
                )
            return self._rules[name]

    def names(self) -> list[str]:
        """Rule names in evaluation order."""
        with self._lock:
            return list(self._rules.keys())

    def items(self) -> list[tuple[str, RuleFn]]:
        """Snapshot of (name, rule) pairs in evaluation order."""
        with self._lock:
            return list(self._rules.items())

    def is_registered(self, name: str) -> bool:
        with self._lock:
            return name in self._rules

    def without(self, *names: str) -> "RuleRegistry":
        """Copy of this registry with the named rules left out.

        Raises:
            RuleRegistryError: If any name is not registered
        """
        for name in names:
            self.get(name)
        copy = RuleRegistry()
        for name, rule in self.items():
            if name not in names:
                copy.register(name)(rule)
        return copy

    def __iter__(self) -> Iterator[tuple[str, RuleFn]]:
        return iter(self.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._rules)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._rules
