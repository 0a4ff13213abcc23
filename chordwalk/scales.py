"""Named scales built from step formulas."""

import typing

import chordwalk.notes


# Semitone steps between consecutive scale degrees, ending back on the root.
SCALE_STEPS: typing.Dict[str, typing.List[int]] = {
	"major": [2, 2, 1, 2, 2, 2, 1],
	"natural_minor": [2, 1, 2, 2, 1, 2, 2],
	"harmonic_minor": [2, 1, 2, 2, 1, 3, 1],
	"melodic_minor": [2, 1, 2, 2, 2, 2, 1],
	"dorian": [2, 1, 2, 2, 2, 1, 2],
	"phrygian": [1, 2, 2, 2, 1, 2, 2],
	"lydian": [2, 2, 2, 1, 2, 2, 1],
	"mixolydian": [2, 2, 1, 2, 2, 1, 2],
	"locrian": [1, 2, 2, 1, 2, 2, 2],
	"major_pentatonic": [2, 2, 3, 2, 3],
	"minor_pentatonic": [3, 2, 2, 3, 2],
	"blues": [3, 2, 1, 1, 3, 2],
}


def get_steps (scale_type: str) -> typing.List[int]:

	"""
	Return the step formula for a named scale.
	"""

	if scale_type not in SCALE_STEPS:
		raise ValueError(f"Unknown scale type: {scale_type!r}. Available: {sorted(SCALE_STEPS)}")

	return list(SCALE_STEPS[scale_type])


def get_scale (root: str, scale_type: str, use_flats: bool = False) -> typing.List[str]:

	"""Return the note names of a scale, root first and root again at the octave.

	Parameters:
		root: Root note name (e.g. ``"D"``, ``"Bb"``).
		scale_type: A key of ``SCALE_STEPS``.
		use_flats: Spell accidentals as flats instead of sharps.

	Raises:
		InvalidNoteError: If the root is not a note name.
		ValueError: If the scale type is unknown.

	Example:
		```python
		get_scale("D", "major")
		# → ["D", "E", "F#", "G", "A", "B", "C#", "D"]
		```
	"""

	current = chordwalk.notes.note_to_int(root)
	steps = get_steps(scale_type)
	scale = [chordwalk.notes.int_to_note(current, use_flats)]

	for step in steps:
		current = (current + step) % 12
		scale.append(chordwalk.notes.int_to_note(current, use_flats))

	return scale


def count_common_pitches (notes_a: typing.Iterable[str], notes_b: typing.Iterable[str]) -> int:

	"""Return how many pitch classes two note collections share, ignoring spelling."""

	pcs_a = {chordwalk.notes.note_to_int(note) for note in notes_a}
	pcs_b = {chordwalk.notes.note_to_int(note) for note in notes_b}

	return len(pcs_a & pcs_b)
