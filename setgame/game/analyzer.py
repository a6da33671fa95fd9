"""Set predicates and play-area search."""

from itertools import combinations
from typing import Callable, Sequence

from setgame.models.card import Card, Colour, Number, Shading, Shape
from setgame.models.projective import ProjectiveCard

# Sum of the three values of any attribute (0 + 1 + 2)
VALUE_TOTAL = 3


def _attribute_ok(x: int, y: int, z: int) -> bool:
    """All equal or all different."""
    return (x == y == z) or (x != y and y != z and z != x)


def is_set(card1: Card, card2: Card, card3: Card) -> bool:
    """Check if three classic cards form a set.

    Each attribute must be either the same on all three cards or different
    on all three. Two identical cards never form a set, even though every
    attribute would then compare equal.

    Args:
        card1: First card
        card2: Second card
        card3: Third card

    Returns:
        True if the cards form a set
    """
    if card1 == card2 or card2 == card3 or card1 == card3:
        return False

    return all(
        _attribute_ok(a, b, c)
        for a, b, c in zip(card1.values(), card2.values(), card3.values())
    )


def third_card(card1: Card, card2: Card) -> Card:
    """Get the unique card that completes a set with two distinct cards.

    Per attribute, keeps the shared value or picks the one value neither
    card has.

    Raises:
        ValueError: If both cards are the same.
    """
    if card1 == card2:
        raise ValueError("Cannot complete a set from two identical cards")

    def complete(x: int, y: int) -> int:
        return x if x == y else VALUE_TOTAL - x - y

    return Card(
        number=Number(complete(card1.number, card2.number)),
        shape=Shape(complete(card1.shape, card2.shape)),
        shading=Shading(complete(card1.shading, card2.shading)),
        colour=Colour(complete(card1.colour, card2.colour)),
    )


def is_projective_set(*cards: ProjectiveCard) -> bool:
    """Check if projective cards form a set.

    A selection of three or more distinct cards is a set when every colour
    appears on an even number of them, i.e. their encodings XOR to zero.
    """
    if len(cards) < 3 or len(set(cards)) != len(cards):
        return False

    parity = 0
    for card in cards:
        parity ^= card.to_int()
    return parity == 0


def find_sets(
    cards: Sequence[Card],
    predicate: Callable[..., bool] = is_set,
) -> list[tuple[int, int, int]]:
    """Find every index triple (i < j < k) whose cards form a set.

    Args:
        cards: Cards in play
        predicate: Three-card set predicate

    Returns:
        Triples ordered by i, then j, then k
    """
    return [
        (i, j, k)
        for i, j, k in combinations(range(len(cards)), 3)
        if predicate(cards[i], cards[j], cards[k])
    ]


def find_projective_sets(
    cards: Sequence[ProjectiveCard],
    min_size: int = 3,
) -> list[tuple[int, ...]]:
    """Find every index selection of at least ``min_size`` cards forming a set.

    Returns:
        Index tuples ordered by size, then lexicographically
    """
    codes = [card.to_int() for card in cards]
    found: list[tuple[int, ...]] = []
    for size in range(max(min_size, 3), len(cards) + 1):
        for combo in combinations(range(len(cards)), size):
            parity = 0
            for index in combo:
                parity ^= codes[index]
            if parity == 0 and len({codes[i] for i in combo}) == size:
                found.append(combo)
    return found


def has_set(
    cards: Sequence[Card],
    predicate: Callable[..., bool] = is_set,
) -> bool:
    """Check if any triple of cards forms a set (stops at the first one)."""
    return any(
        predicate(cards[i], cards[j], cards[k])
        for i, j, k in combinations(range(len(cards)), 3)
    )


def has_projective_set(cards: Sequence[ProjectiveCard]) -> bool:
    """Check if any selection of distinct projective cards forms a set.

    Distinct non-empty cards contain a set exactly when their encodings are
    linearly dependent over GF(2), so this reduces the codes into an XOR
    basis instead of enumerating subsets.
    """
    basis: list[int] = []
    for code in {card.to_int() for card in cards}:
        for vector in basis:
            code = min(code, code ^ vector)
        if code == 0:
            return True
        basis.append(code)
        basis.sort(reverse=True)
    return False
