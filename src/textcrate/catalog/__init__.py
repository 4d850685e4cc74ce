"""Message catalogs: descriptors, code derivation and runtime instances.

Catalog discovery is left to the caller; this package only consumes the
plain CatalogSpec / MessageDescriptor values it produces.

Python 3.13+.
"""

from .catalog import Catalog, validate_catalog
from .codes import code_value, derive_code
from .descriptors import CatalogSpec, MessageDescriptor, freeze_properties
from .instance import MessageInstance

__all__ = [
    "Catalog",
    "CatalogSpec",
    "MessageDescriptor",
    "MessageInstance",
    "code_value",
    "derive_code",
    "freeze_properties",
    "validate_catalog",
]
