"""Built-in operations, assembled in registration order."""

from typing import List

from woodev.core.operations.base import OperationDescriptor
from woodev.core.operations.catalog.build import get_build_operations
from woodev.core.operations.catalog.git import get_git_operations
from woodev.core.operations.catalog.php import make_php_test_operations
from woodev.core.operations.catalog.site import get_site_operations

# Registration order is execution order
DEFAULT_ORDER = [
    "clone",
    "checkout",
    "stash",
    "install",
    "build",
    "link",
    "mount",
    "start",
    "test:php:prepare",
    "test:php",
    "test:php:failing",
    "push",
    "watch",
    "open",
]


def get_default_operations() -> List[OperationDescriptor]:
    """Return every built-in operation in registration order."""
    available = {}
    available.update(get_git_operations())
    available.update(get_build_operations())
    available.update(get_site_operations())
    available.update(make_php_test_operations())
    return [available[name] for name in DEFAULT_ORDER]


__all__ = ["DEFAULT_ORDER", "get_default_operations"]
