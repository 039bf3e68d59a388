"""Import command modules for their registration side-effects."""

# Re-exporting modules isn't required; importing ensures registration happens.
from . import meta as _meta  # noqa: F401
from . import navigation as _navigation  # noqa: F401
from . import permissions as _permissions  # noqa: F401
from . import search as _search  # noqa: F401

__all__ = []
