"""Type compatibility rule for one structural address."""

from __future__ import annotations

from typing import Any

from webhook_contract_ci.schema_normalization import as_type_names


def is_type_compatible(base_type: Any, next_type: Any) -> bool:
    """Return True when *next_type* still satisfies consumers of *base_type*.

    Each argument may be None, a type name, or a list of names. The rule is
    asymmetric:

    * an unconstrained base type can never be broken;
    * a constrained base type with an unconstrained next type is a
      regression, since consumers lose a guarantee they relied on;
    * otherwise the two name sets must share at least one name. Narrowing
      or widening a union is accepted as long as some overlap remains.
    """
    base_names = as_type_names(base_type)
    if base_names is None:
        return True
    next_names = as_type_names(next_type)
    if next_names is None:
        return False
    return not set(base_names).isdisjoint(next_names)
