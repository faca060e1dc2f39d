"""Singleton - one load balancer shared by every caller."""
import random
import threading
from typing import List, Optional

from design_patterns.catalog import Participant, PatternCategory, PatternDemo, PatternInfo, register_pattern

SERVERS = ("ServerI", "ServerII", "ServerIII", "ServerIV", "ServerV")


class LoadBalancer:
    """
    Thread-safe lazily created singleton.

    Use ``get_instance()``; the constructor is only called once per process
    (or per ``reset_instance()``).
    """

    _instance: Optional["LoadBalancer"] = None
    _lock = threading.RLock()

    def __init__(self):
        self._servers: List[str] = list(SERVERS)
        self._random = random.Random()

    @classmethod
    def get_instance(cls) -> "LoadBalancer":
        """Get singleton instance of the load balancer."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the instance (for testing)."""
        with cls._lock:
            cls._instance = None

    @property
    def servers(self) -> List[str]:
        return list(self._servers)

    def seed(self, value: Optional[int]) -> None:
        """Make server selection reproducible."""
        self._random.seed(value)

    @property
    def server(self) -> str:
        """A randomly chosen server."""
        return self._random.choice(self._servers)


@register_pattern
class SingletonDemo(PatternDemo):
    info = PatternInfo(
        slug="singleton",
        name="Singleton",
        category=PatternCategory.CREATIONAL,
        intent="Ensure a class only has one instance, and provide a global point of access to it.",
        participants=[
            Participant(role="Singleton", class_name="LoadBalancer",
                        description="get_instance() lazily creates and returns the sole instance"),
        ],
        applicability=[
            "there must be exactly one instance of a class, accessible from a well-known point",
        ],
    )

    def run(self) -> None:
        b1 = LoadBalancer.get_instance()
        b2 = LoadBalancer.get_instance()
        b3 = LoadBalancer.get_instance()
        b4 = LoadBalancer.get_instance()

        if b1 is b2 is b3 is b4:
            self.emit("Same instance")

        if self.settings.random_seed is not None:
            b1.seed(self.settings.random_seed)

        # Every request goes through the same balancer
        for _ in range(self.settings.load_balancer_requests):
            self.emit(f"Dispatch Request: {b1.server}")
