import logging
from typing import Any, Dict

from .base import DescribeCapable

logger = logging.getLogger(__name__)

_MISSING = object()


class CachedDescribeConnection(DescribeCapable):
    """Wraps a simple_salesforce handle and memoizes its describe calls.

    Results are kept for the lifetime of the wrapper. Every attribute other
    than the two describe methods is looked up on the wrapped handle.
    """

    def __init__(self, sf):
        self._sf = sf
        self._global_describe: Any = _MISSING
        self._describes: Dict[str, Any] = {}

    @property
    def wrapped(self):
        return self._sf

    def describe_global(self) -> Dict[str, Any]:
        if self._global_describe is _MISSING:
            logger.debug("describe_global cache miss")
            self._global_describe = self._sf.describe()
        return self._global_describe

    def describe(self, object_name: str) -> Dict[str, Any]:
        if object_name not in self._describes:
            logger.debug("describe cache miss for %s", object_name)
            self._describes[object_name] = getattr(self._sf, object_name).describe()
        return self._describes[object_name]

    def cache_info(self) -> Dict[str, Any]:
        return {
            "global": self._global_describe is not _MISSING,
            "objects": sorted(self._describes),
        }

    def __getattr__(self, name):
        # Only reached for names not found on the wrapper itself.
        sf = self.__dict__.get("_sf")
        if sf is None:
            raise AttributeError(name)
        return getattr(sf, name)
