import random
import typing

import pytest

import chordwalk.models


def make_progression (labels: typing.List[str], type_tag: typing.Optional[str] = None, **metadata: typing.Any) -> chordwalk.models.Progression:

	"""Build a progression with one chord per bar."""

	return chordwalk.models.Progression(bars=[[[label]] for label in labels], type_tag=type_tag, **metadata)


@pytest.fixture
def catalog () -> typing.List[chordwalk.models.Chord]:

	"""A small C major catalog."""

	return [
		chordwalk.models.Chord("I", "C", ["C", "E", "G"], ["Cmaj", "CM"]),
		chordwalk.models.Chord("ii", "Dm", ["D", "F", "A"]),
		chordwalk.models.Chord("iii", "Em", ["E", "G", "B"]),
		chordwalk.models.Chord("IV", "F", ["F", "A", "C"]),
		chordwalk.models.Chord("V", "G", ["G", "B", "D"]),
		chordwalk.models.Chord("V7", "G7", ["G", "B", "D", "F"], ["Gdom7"]),
		chordwalk.models.Chord("vi", "Am", ["A", "C", "E"]),
		chordwalk.models.Chord("viio", "Bo", ["B", "D", "F"], ["Bdim"]),
	]


@pytest.fixture
def pop_corpus () -> typing.List[chordwalk.models.Progression]:

	"""A corpus that contains an I-IV-V-vi path and nothing else leading to vi."""

	return [
		make_progression(["I", "IV", "V", "vi"]),
	]


@pytest.fixture
def rng () -> random.Random:

	"""A seeded random source."""

	return random.Random(42)
