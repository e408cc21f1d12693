"""Known-malicious file signatures."""

# SHA-1 digests of known malicious files. The duplicate entry is part of the
# published list and is absorbed by the frozenset.
_INFECTED_HASH_LIST = (
    "179b5da318604f97616b5108f305e2a8e4609484",
    "1a1c4dcae846866c58cc1abf71fb7f7aa4e7352a",
    "e4d55310039b965fce6756da5286b481cfb09946",
    "2f47e57a6bedc729359ffaf6f0149876008b5cc3",
    "2f47e57a6bedc729359ffaf6f0149876008b5cc3",
)

INFECTED_HASHES: frozenset[str] = frozenset(_INFECTED_HASH_LIST)


def is_infected_hash(digest: str) -> bool:
    """Return True if ``digest`` (lowercase hex SHA-1) is a known signature."""
    return digest in INFECTED_HASHES
