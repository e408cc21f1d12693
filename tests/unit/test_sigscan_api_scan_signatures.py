"""Unit tests for sigscan.api.scan.signatures."""

import pytest

from sigscan.api.scan import signatures
from sigscan.api.scan.signatures import INFECTED_HASHES, is_infected_hash

pytestmark = pytest.mark.scan


def test_reference_list_deduplicated():
    """The duplicate entry collapses into one member."""
    assert len(signatures._INFECTED_HASH_LIST) == 5
    assert len(INFECTED_HASHES) == 4


def test_signature_set_is_immutable():
    assert isinstance(INFECTED_HASHES, frozenset)
    assert not hasattr(INFECTED_HASHES, "add")


@pytest.mark.parametrize(
    "digest",
    [
        "179b5da318604f97616b5108f305e2a8e4609484",
        "1a1c4dcae846866c58cc1abf71fb7f7aa4e7352a",
        "e4d55310039b965fce6756da5286b481cfb09946",
        "2f47e57a6bedc729359ffaf6f0149876008b5cc3",
    ],
)
def test_known_signatures_are_infected(digest):
    assert is_infected_hash(digest) is True


def test_other_digests_are_not_infected():
    assert is_infected_hash("aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d") is False
    assert is_infected_hash("") is False


def test_membership_is_on_lowercase_hex():
    """The hasher emits lowercase; uppercase input is not normalised."""
    assert is_infected_hash("179B5DA318604F97616B5108F305E2A8E4609484") is False
