"""Order-preserving deduplication and exclusion filtering.

Both helpers keep the first occurrence order of their input, which is the
order the domains are written to the disavow file.
"""

from typing import AbstractSet, Iterable


def deduplicate(domains: Iterable[str]) -> list[str]:
    """Remove repeated entries, keeping the first occurrence of each.

    Args:
        domains: Canonical directives, possibly repeated

    Returns:
        Deduplicated list in first occurrence order
    """
    seen: set[str] = set()
    unique = []

    for domain in domains:
        if domain not in seen:
            seen.add(domain)
            unique.append(domain)

    return unique


def exclude(domains: Iterable[str], exclusion_set: AbstractSet[str]) -> list[str]:
    """Drop every entry that is a member of the exclusion set.

    Args:
        domains: Canonical directives
        exclusion_set: Canonical directives to remove

    Returns:
        Remaining directives in input order
    """
    if not exclusion_set:
        return list(domains)
    return [domain for domain in domains if domain not in exclusion_set]
