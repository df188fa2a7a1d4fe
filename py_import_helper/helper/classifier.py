"""Classification of modules into PEP 8 import groups."""

import logging
from collections.abc import Iterable

from py_import_helper.helper.registry import is_stdlib_module
from py_import_helper.helper.types import ImportCategory

__all__ = ['classify', 'is_local_module', 'ModuleClassifier']

logger = logging.getLogger(__name__)

FUTURE_MODULE = '__future__'


def is_local_module(
    module: str, package_name: str = '', local_prefixes: Iterable[str] = ()
) -> bool:
    """Check whether an absolute module belongs to the consuming project.

    A module is local when it is ``package_name`` or one of the local
    prefixes, or a submodule of either.
    """
    return any(
        prefix and (module == prefix or module.startswith(f'{prefix}.'))
        for prefix in (package_name, *local_prefixes)
    )


def classify(
    module: str,
    relative_level: int = 0,
    package_name: str = '',
    local_prefixes: Iterable[str] = (),
) -> ImportCategory:
    """Determine the import group of a module.

    The first matching rule wins:
    1. relative imports are local
    2. ``__future__`` is the future group
    3. the configured package name or a local prefix makes it local
    4. a standard library top-level package makes it stdlib
    5. anything else is third-party

    Never fails; unknown modules are third-party.
    """
    if relative_level > 0:
        return ImportCategory.LOCAL
    if module == FUTURE_MODULE:
        return ImportCategory.FUTURE
    if is_local_module(module, package_name, local_prefixes):
        return ImportCategory.LOCAL
    if is_stdlib_module(module):
        return ImportCategory.STDLIB
    return ImportCategory.THIRD_PARTY


class ModuleClassifier:
    """Memoizing classifier bound to one project configuration.

    Results are cached per ``(module, relative_level, fingerprint)`` where the
    fingerprint captures the package name and local prefixes. Call
    ``clear_cache()`` whenever either changes.

    Example:
        >>> classifier = ModuleClassifier(package_name='myapp')
        >>> classifier.classify('myapp.models')
        <ImportCategory.LOCAL: 'local'>
    """

    def __init__(self, package_name: str = '', local_prefixes: Iterable[str] = ()):
        self.package_name = package_name
        self.local_prefixes = set(local_prefixes)
        self._cache: dict[tuple, ImportCategory] = {}

    @property
    def fingerprint(self) -> tuple[str, frozenset[str]]:
        return self.package_name, frozenset(self.local_prefixes)

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def configure(
        self,
        package_name: str | None = None,
        local_prefixes: Iterable[str] | None = None,
    ) -> None:
        """Update the configuration and drop all memoized results."""
        if package_name is not None:
            self.package_name = package_name
        if local_prefixes is not None:
            self.local_prefixes = set(local_prefixes)
        self.clear_cache()

    def classify(self, module: str, relative_level: int = 0) -> ImportCategory:
        key = (module, relative_level, self.fingerprint)
        category = self._cache.get(key)
        if category is None:
            category = classify(
                module, relative_level, self.package_name, self.local_prefixes
            )
            qualified = '.' * relative_level + module
            logger.debug(f'Classified {qualified} as {category.value}')
            self._cache[key] = category
        return category

    def clear_cache(self) -> None:
        if self._cache:
            logger.debug(f'Dropping {len(self._cache)} cached classifications')
        self._cache.clear()
