"""
Base service classes and shared context.

The ServiceContext holds the graph and the configuration that services need.
This allows the CLI (main.py) and the API to share the same logic.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Optional
from dataclasses import dataclass, field

from ..config import Config, load_config
from ..graph import SocialGraphStore, DistanceEngine, RecommendationEngine

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """
    Many concurrent readers, one exclusive writer.

    Writers wait for active readers to leave; new readers wait while a
    writer is waiting or active.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


@dataclass
class ServiceContext:
    """
    Shared context for all services.

    Owns one social graph and the engines built on it. Every service created
    from the same context sees the same graph; separate contexts are fully
    independent.
    """
    config: Config
    store: SocialGraphStore
    distances: DistanceEngine
    engine: RecommendationEngine
    lock: ReadWriteLock = field(default_factory=ReadWriteLock, repr=False)

    @classmethod
    def create(
        cls,
        config: Optional[Config] = None,
        store: Optional[SocialGraphStore] = None
    ) -> "ServiceContext":
        """
        Factory method to create a ServiceContext with all dependencies.

        Args:
            config: Optional config (loads from env if not provided)
            store: Optional store (starts with an empty graph if not provided)

        Returns:
            Configured ServiceContext
        """
        cfg = config or load_config()
        graph_store = store if store is not None else SocialGraphStore()
        distances = DistanceEngine(graph_store)
        engine = RecommendationEngine(graph_store, distances)

        return cls(
            config=cfg,
            store=graph_store,
            distances=distances,
            engine=engine
        )


class BaseService:
    """
    Base class for all services.

    Each service receives the shared context and provides focused functionality.
    """

    def __init__(self, context: ServiceContext):
        self.context = context

    @property
    def config(self) -> Config:
        return self.context.config

    @property
    def store(self) -> SocialGraphStore:
        return self.context.store

    @property
    def lock(self) -> ReadWriteLock:
        return self.context.lock
