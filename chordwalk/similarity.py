"""Harmonic closeness between catalog chords.

The score blends three components::

	score = 0.2 * root_closeness + 0.7 * note_overlap + 0.1 * quality_match

``root_closeness`` compares roots around the circle of semitones,
``note_overlap`` is the Jaccard index of the chord tones after enharmonic
normalization (``Db`` and ``C#`` count as the same tone), and
``quality_match`` compares a rough quality read from the chord symbol.

The quality check is a text heuristic, not a chord parser: a symbol
containing ``"o"`` is diminished, otherwise one containing ``"m"`` is minor,
otherwise major. ``"Cmaj7"`` therefore reads as minor.
"""

import random
import typing

import chordwalk.canonical
import chordwalk.models
import chordwalk.notes
import chordwalk.roots


# Component weights, in tenths of the final score.
ROOT_WEIGHT = 2
OVERLAP_WEIGHT = 7
QUALITY_WEIGHT = 1

DEFAULT_SIMILARITY_THRESHOLD = 0.8

QUALITY_DIMINISHED = "diminished"
QUALITY_MINOR = "minor"
QUALITY_MAJOR = "major"


def quality_of (label: str) -> str:

	"""Return the approximate quality of a chord label from its text."""

	if "o" in label:
		return QUALITY_DIMINISHED

	if "m" in label:
		return QUALITY_MINOR

	return QUALITY_MAJOR


def root_closeness (chord_a: chordwalk.models.Chord, chord_b: chordwalk.models.Chord) -> float:

	"""Return 1.0 for identical roots, falling to 0.0 at a tritone."""

	distance = chordwalk.notes.circular_distance(
		chordwalk.roots.chord_root_pc(chord_a.roman_numeral),
		chordwalk.roots.chord_root_pc(chord_b.roman_numeral)
	)

	return 1.0 - distance / 6


def pitch_class_set (notes: typing.Iterable[str]) -> typing.Set[int]:

	"""Return the pitch classes of a list of note names."""

	return {chordwalk.notes.note_to_int(note) for note in notes}


def note_overlap (chord_a: chordwalk.models.Chord, chord_b: chordwalk.models.Chord) -> float:

	"""Return the Jaccard index of the two chords' pitch class sets.

	Two chords without notes are treated as identical (1.0).
	"""

	pcs_a = pitch_class_set(chord_a.notes)
	pcs_b = pitch_class_set(chord_b.notes)
	union = pcs_a | pcs_b

	if not union:
		return 1.0

	return len(pcs_a & pcs_b) / len(union)


def quality_match (chord_a: chordwalk.models.Chord, chord_b: chordwalk.models.Chord) -> float:

	"""Return 1.0 when both symbols read as the same quality, else 0.0."""

	return 1.0 if quality_of(chord_a.symbol) == quality_of(chord_b.symbol) else 0.0


def get_proximity (chord_a: chordwalk.models.Chord, chord_b: chordwalk.models.Chord) -> float:

	"""Return a harmonic similarity score in [0, 1].

	Example:
		```python
		c_major = Chord("I", "C", ["C", "E", "G"])
		a_minor = Chord("vi", "Am", ["A", "C", "E"])
		get_proximity(c_major, c_major)  # → 1.0
		get_proximity(c_major, a_minor)  # → 0.2 * 0.5 + 0.7 * 0.5 + 0.0 = 0.45
		```
	"""

	return (
		ROOT_WEIGHT * root_closeness(chord_a, chord_b)
		+ OVERLAP_WEIGHT * note_overlap(chord_a, chord_b)
		+ QUALITY_WEIGHT * quality_match(chord_a, chord_b)
	) / 10


def rank_similar (
	chord: chordwalk.models.Chord,
	pool: typing.Sequence[chordwalk.models.Chord]
) -> typing.List[typing.Tuple[str, float]]:

	"""Score every pool chord against ``chord``, best first.

	Ties keep pool order.
	"""

	scored = [(candidate.roman_numeral, get_proximity(chord, candidate)) for candidate in pool]

	return sorted(scored, key=lambda item: -item[1])


def find_similar (
	label: str,
	pool: typing.Sequence[chordwalk.models.Chord],
	rng: random.Random,
	threshold: float = DEFAULT_SIMILARITY_THRESHOLD
) -> typing.List[str]:

	"""Return canonical labels of pool chords scoring at least ``threshold`` against ``label``.

	When ``label`` does not name a pool chord, a pool chord is picked at random
	to stand in for it. The result keeps pool order and may be empty.
	"""

	if not pool:
		return []

	chord = chordwalk.canonical.find_chord(label, pool)

	if chord is None:
		chord = rng.choice(list(pool))

	return [
		candidate.roman_numeral
		for candidate in pool
		if get_proximity(chord, candidate) >= threshold
	]
