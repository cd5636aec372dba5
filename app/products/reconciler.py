"""
Matching requested variants against the variant Shopify creates by default.
"""

from dataclasses import dataclass
from typing import Dict, List, Mapping, Sequence

from .errors import ReconciliationError
from .models import VariantSpec
from .remote import RemoteVariant


@dataclass
class ReconciliationResult:
    """The requested variant Shopify already created, and the rest."""
    matched: VariantSpec
    remainder: List[VariantSpec]


def selected_options_map(variant: RemoteVariant) -> Dict[str, str]:
    """Option name -> value for a remote variant."""
    return dict(variant.selected_options)


def split_variants(
    variants: Sequence[VariantSpec],
    default_options: Mapping[str, str],
) -> ReconciliationResult:
    """
    Partition requested variants into the default one and the remainder.

    A variant matches when its options mapping equals default_options
    exactly: same names, same values, order ignored. Remainder keeps the
    input order.

    Raises:
        ReconciliationError: If no variant matches
    """
    expected = dict(default_options)
    matched = None
    remainder: List[VariantSpec] = []

    for variant in variants:
        if matched is None and dict(variant.options) == expected:
            matched = variant
        else:
            remainder.append(variant)

    if matched is None:
        raise ReconciliationError(
            f"No requested variant matches the default variant options {expected}"
        )

    return ReconciliationResult(matched=matched, remainder=remainder)
