import itertools

import pytest

from astrosubs.card import Card, Number, Suit


def test_ace_of_spades():
    assert str(Card(Number.ACE, Suit.SPADES)) == "Ace of Spades"


def test_queen_of_hearts():
    assert str(Card(Number.QUEEN, Suit.HEARTS)) == "Queen of Hearts"


def test_deck_has_52_distinct_names():
    names = {str(Card(n, s)) for n, s in itertools.product(Number, Suit)}
    assert len(names) == 52


@pytest.mark.parametrize("suit", list(Suit))
def test_name_form(suit):
    for number in Number:
        text = str(Card(number, suit))
        left, right = text.split(" of ")
        assert left == str(number)
        assert right == str(suit)


def test_cards_compare_by_value():
    assert Card(Number.TEN, Suit.CLUBS) == Card(Number.TEN, Suit.CLUBS)
    assert Card(Number.TEN, Suit.CLUBS) != Card(Number.TEN, Suit.DIAMONDS)