"""Pitch class arithmetic over the 12-tone chromatic space.

Module-level constants:
- `NOTE_NAME_TO_PC`: Maps note names (e.g., `"C"`, `"F#"`, `"Bb"`, `"Cb"`) to pitch classes (0-11)
- `SHARP_NAMES`: Sharp spelling for each pitch class
- `FLAT_NAMES`: Flat spelling for each pitch class

Lookups are case-insensitive and ignore surrounding whitespace, so `"db"`,
`" Db "` and `"DB"` all resolve to pitch class 1.
"""

import typing


class InvalidNoteError (ValueError):

	"""Raised when a note name cannot be resolved to a pitch class."""


NOTE_NAME_TO_PC: typing.Dict[str, int] = {
	"C": 0,
	"B#": 0,
	"C#": 1,
	"Db": 1,
	"D": 2,
	"D#": 3,
	"Eb": 3,
	"E": 4,
	"Fb": 4,
	"F": 5,
	"E#": 5,
	"F#": 6,
	"Gb": 6,
	"G": 7,
	"G#": 8,
	"Ab": 8,
	"A": 9,
	"A#": 10,
	"Bb": 10,
	"B": 11,
	"Cb": 11,
}

SHARP_NAMES: typing.List[str] = [
	"C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"
]

FLAT_NAMES: typing.List[str] = [
	"C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
]

_FOLDED_NAME_TO_PC: typing.Dict[str, int] = {name.lower(): pc for name, pc in NOTE_NAME_TO_PC.items()}


def note_to_int (name: str) -> int:

	"""Return the pitch class (0-11) for a note name.

	Parameters:
		name: Note name (e.g. ``"C"``, ``"F#"``, ``"Bb"``).

	Returns:
		Pitch class integer (0-11).

	Raises:
		InvalidNoteError: If the name is not recognised.

	Example:
		```python
		note_to_int("C#")  # → 1
		note_to_int("Db")  # → 1
		note_to_int("Cb")  # → 11
		```
	"""

	key = name.strip().lower() if isinstance(name, str) else None

	if key is None or key not in _FOLDED_NAME_TO_PC:
		raise InvalidNoteError(f"Unknown note: {name!r}. Expected e.g. 'C', 'F#', 'Bb'.")

	return _FOLDED_NAME_TO_PC[key]


def int_to_note (pitch_class: int, use_flats: bool = False) -> str:

	"""Return the spelling of a pitch class.

	Any integer is accepted and reduced mod 12, so ``-1`` spells as ``"B"``.
	"""

	pc = pitch_class % 12

	return FLAT_NAMES[pc] if use_flats else SHARP_NAMES[pc]


def enharmonic_names (pitch_class: int) -> typing.List[str]:

	"""Return the sharp and flat names for a pitch class, without duplicates.

	Example:
		```python
		enharmonic_names(1)  # → ["C#", "Db"]
		enharmonic_names(0)  # → ["C"]
		```
	"""

	pc = pitch_class % 12
	names = [SHARP_NAMES[pc]]

	if FLAT_NAMES[pc] != SHARP_NAMES[pc]:
		names.append(FLAT_NAMES[pc])

	return names


def are_enharmonically_equivalent (note_a: str, note_b: str) -> bool:

	"""Return True when two note names share a pitch class."""

	return note_to_int(note_a) == note_to_int(note_b)


def circular_distance (pc_a: int, pc_b: int) -> int:

	"""Return the shortest distance between two pitch classes around the circle (0-6)."""

	diff = abs(pc_a - pc_b) % 12

	return min(diff, 12 - diff)
