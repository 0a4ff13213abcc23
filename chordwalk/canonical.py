"""Alias resolution and progression flattening.

Every alias of every catalog chord maps to that chord's roman numeral. When two
chords claim the same alias, the chord registered first keeps it.
"""

import typing

import chordwalk.models


CanonicalIndex = typing.Dict[str, str]


def build_index (chords: typing.Iterable[chordwalk.models.Chord]) -> CanonicalIndex:

	"""Map each alias to its canonical label.

	Example:
		```python
		index = build_index([Chord("V7", "G7", synonyms=["G dom7"])])
		index["G7"]  # → "V7"
		```
	"""

	index: CanonicalIndex = {}

	for chord in chords:
		for name in chord.all_names():
			if name not in index:
				index[name] = chord.roman_numeral

	return index


def canonicalize (label: str, index: CanonicalIndex) -> str:

	"""Return the canonical label for an alias, or the label itself when unknown."""

	return index.get(label, label)


def flatten (progression: chordwalk.models.Progression, index: CanonicalIndex) -> typing.List[str]:

	"""Return the progression as one canonical label sequence.

	Labels are read bar by bar, beat by beat, left to right within a beat.
	Unknown labels are kept unchanged so callers can report them.
	"""

	return [
		canonicalize(label, index)
		for bar in progression.bars
		for beat in bar
		for label in beat
	]


def start_candidates (progressions: typing.Iterable[chordwalk.models.Progression], index: CanonicalIndex) -> typing.List[str]:

	"""Return the first chord of every non-empty progression, with repeats, in corpus order."""

	candidates: typing.List[str] = []

	for progression in progressions:
		sequence = flatten(progression, index)

		if sequence:
			candidates.append(sequence[0])

	return candidates


def find_chord (name: str, chords: typing.Iterable[chordwalk.models.Chord]) -> typing.Optional[chordwalk.models.Chord]:

	"""Find a catalog chord by name.

	The symbol and synonyms match case-insensitively, the roman numeral matches
	exactly (``"V"`` and ``"v"`` are different chords). Returns the first
	matching chord, or None.
	"""

	needle = name.strip()
	folded = needle.casefold()

	for chord in chords:

		if chord.symbol and chord.symbol.casefold() == folded:
			return chord

		if any(synonym.casefold() == folded for synonym in chord.synonyms):
			return chord

		if chord.roman_numeral == needle:
			return chord

	return None


def unknown_labels (progressions: typing.Iterable[chordwalk.models.Progression], index: CanonicalIndex) -> typing.List[str]:

	"""Return labels used in the corpus that no catalog chord claims, in first-seen order."""

	known = set(index.values())
	unknown: typing.List[str] = []

	for progression in progressions:
		for label in flatten(progression, index):
			if label not in known and label not in unknown:
				unknown.append(label)

	return unknown
