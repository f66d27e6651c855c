"""
Shared Resource Cache
=====================
Initialize-once holders for heavy linguistic resources.

Features:
- Lazy construction on first get()
- Double-checked locking: one construction per cache even under
  concurrent callers, lock-free reads once built
- Failed construction is not cached; the next get() retries
- Explicit, idempotent release()

ComputeOnce follows the same discipline for derived products (such as a
rule list built from a resource). It is kept separate from ResourceCache
so that releasing a raw resource never touches a product computed from it.
"""

import threading
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from .log import get_logger

__version__ = "1.0.0"

T = TypeVar('T')

logger = get_logger(__name__)


def _close_handle(handle: Any):
    close = getattr(handle, 'close', None)
    if callable(close):
        close()


class ResourceCache(Generic[T]):
    """
    Lazily constructed, thread-safe holder for one kind of resource.

    Args:
        kind: Resource kind, used in logs and status (e.g. 'language_model')
        loader: Callable building the handle from the locator passed to get()
        closer: Callable releasing a handle; defaults to handle.close()
    """

    def __init__(
        self,
        kind: str,
        loader: Callable[..., T],
        closer: Optional[Callable[[T], None]] = None
    ):
        self.kind = kind
        self._loader = loader
        self._closer = closer or _close_handle
        self._handle: Optional[T] = None
        self._lock = threading.Lock()
        self._constructions = 0

    @property
    def is_loaded(self) -> bool:
        return self._handle is not None

    def get(self, *locator, **options) -> T:
        """
        Return the cached handle, constructing it from locator on first use.

        Once a handle is cached the locator is ignored. Errors raised by the
        loader propagate and leave the cache empty.
        """
        handle = self._handle
        if handle is not None:
            return handle

        with self._lock:
            if self._handle is None:
                with logger.log_operation("resource construction", kind=self.kind):
                    self._handle = self._loader(*locator, **options)
                self._constructions += 1
            return self._handle

    def release(self):
        """Close and forget the handle. No-op when nothing is cached."""
        with self._lock:
            handle = self._handle
            self._handle = None
            if handle is None:
                return
            logger.debug("Releasing resource", kind=self.kind)
            self._closer(handle)

    def get_status(self) -> Dict[str, Any]:
        """Get cache status."""
        return {
            'kind': self.kind,
            'loaded': self.is_loaded,
            'constructions': self._constructions,
        }


class ComputeOnce(Generic[T]):
    """
    Memoizes one derived product per owner.

    The first successful compute() result is kept and returned to every
    later caller, whatever arguments they pass.
    """

    def __init__(self, name: str):
        self.name = name
        self._value: Optional[T] = None
        self._computed = False
        self._lock = threading.Lock()

    @property
    def is_computed(self) -> bool:
        return self._computed

    def get_or_compute(self, compute: Callable[[], T]) -> T:
        if self._computed:
            return self._value

        with self._lock:
            if not self._computed:
                with logger.log_operation("memoized computation", product=self.name):
                    self._value = compute()
                self._computed = True
            return self._value
