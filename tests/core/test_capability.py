"""Tests for the capability-rank engine."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from zipcursor.core.capability import (
    Capability,
    Rank,
    capability_of,
    is_multipass,
    rank_of,
    require,
    supports,
    tag_of,
    weakest,
)
from zipcursor.core.errors import CapabilityError, CursorProtocolError

capabilities = st.sampled_from(list(Capability))


@pytest.mark.parametrize(
    ("tag", "rank"),
    [
        (Capability.INPUT, 1),
        (Capability.OUTPUT, 1),
        (Capability.FORWARD, 1),
        (Capability.BIDIRECTIONAL, 2),
        (Capability.RANDOM_ACCESS, 3),
    ],
)
def test_rank_of(tag, rank):
    assert rank_of(tag) == rank
    assert tag.rank == rank


def test_rank_one_resolves_to_forward():
    """Single-pass tags never come back out of the engine."""
    assert tag_of(1) is Capability.FORWARD
    assert tag_of(Rank.BIDIRECTIONAL) is Capability.BIDIRECTIONAL
    assert tag_of(3) is Capability.RANDOM_ACCESS


@pytest.mark.parametrize("rank", [0, 4, -1])
def test_tag_of_rejects_unknown_ranks(rank):
    with pytest.raises(ValueError, match="No capability has rank"):
        tag_of(rank)


def test_rank_of_rejects_non_capabilities():
    with pytest.raises(TypeError):
        rank_of("forward")  # type: ignore[arg-type]


def test_weakest_requires_at_least_one_tag():
    with pytest.raises(TypeError, match="at least one"):
        weakest()


def test_weakest_known_pairs():
    assert weakest(Capability.BIDIRECTIONAL, Capability.RANDOM_ACCESS) is Capability.BIDIRECTIONAL
    assert weakest(Capability.FORWARD, Capability.RANDOM_ACCESS) is Capability.FORWARD
    assert weakest(Capability.INPUT, Capability.BIDIRECTIONAL) is Capability.FORWARD
    assert weakest(Capability.OUTPUT, Capability.INPUT) is Capability.FORWARD
    assert weakest(Capability.RANDOM_ACCESS) is Capability.RANDOM_ACCESS


@given(a=capabilities, b=capabilities)
def test_weakest_is_commutative(a, b):
    assert weakest(a, b) is weakest(b, a)


@given(a=capabilities)
def test_weakest_is_idempotent_under_rank_one_normalisation(a):
    assert weakest(a, a) is tag_of(rank_of(a))


@given(a=capabilities, b=capabilities, c=capabilities)
def test_weakest_is_associative(a, b, c):
    assert weakest(weakest(a, b), c) is weakest(a, weakest(b, c)) is weakest(a, b, c)


@given(tags=st.lists(capabilities, min_size=1, max_size=6))
def test_every_component_supports_the_weakest(tags):
    """PROPERTY: The composite never advertises more than a component can do."""
    result = weakest(*tags)

    assert result not in (Capability.INPUT, Capability.OUTPUT)
    assert all(supports(tag, result) for tag in tags)
    assert rank_of(result) == min(rank_of(tag) for tag in tags)


def test_supports():
    assert supports(Capability.RANDOM_ACCESS, Capability.BIDIRECTIONAL)
    assert supports(Capability.INPUT, Capability.FORWARD)
    assert not supports(Capability.FORWARD, Capability.BIDIRECTIONAL)


def test_is_multipass():
    assert not is_multipass(Capability.INPUT)
    assert not is_multipass(Capability.OUTPUT)
    assert is_multipass(Capability.FORWARD)
    assert is_multipass(Capability.RANDOM_ACCESS)


class _Bidirectional:
    capability = Capability.BIDIRECTIONAL


def test_capability_of_reads_class_attribute():
    assert capability_of(_Bidirectional()) is Capability.BIDIRECTIONAL
    assert capability_of(_Bidirectional) is Capability.BIDIRECTIONAL


def test_capability_of_rejects_undeclared_cursors():
    with pytest.raises(CursorProtocolError, match="does not declare"):
        capability_of(object())


def test_require():
    require(_Bidirectional(), Capability.FORWARD, "advance")

    with pytest.raises(CapabilityError, match="jump requires random_access"):
        require(_Bidirectional(), Capability.RANDOM_ACCESS, "jump")


def test_capability_error_is_a_type_error():
    with pytest.raises(TypeError):
        require(_Bidirectional(), Capability.RANDOM_ACCESS, "jump")
