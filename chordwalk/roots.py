"""Root pitch lookup for roman numeral chord labels.

Roots are resolved against a fixed C major reference, which is enough to
compare chords with each other but does not transpose into other keys.
Labels the table does not know resolve to ``"C"`` rather than raising.
"""

import typing

import chordwalk.notes


# Roman numeral → root note name in the C major reference key.
ROMAN_TO_NOTE: typing.Dict[str, str] = {
	"I": "C",
	"ii": "D", "II": "D",
	"iii": "E", "III": "E",
	"IV": "F",
	"V": "G",
	"vi": "A", "VI": "A",
	"vii": "B", "VII": "B",
	"bII": "Db", "#I": "C#",
	"bIII": "Eb", "#II": "D#",
	"bV": "Gb", "#IV": "F#",
	"bVI": "Ab", "#V": "G#",
	"bVII": "Bb", "#VI": "A#",
}

# Semitone shift applied to the target's root for "X/Y" secondary chords, keyed by X.
SECONDARY_FUNCTION_SHIFTS: typing.Dict[str, int] = {
	"V": 7,
	"IV": 5,
	"ii": 2,
	"viio": -1,
}

FALLBACK_ROOT = "C"

# "64" must go before "6" so second inversion marks are removed whole.
_EXTENSION_MARKS: typing.Tuple[str, ...] = ("64", "7", "6")


def strip_extensions (numeral: str) -> str:

	"""Remove inversion and seventh digits (``64``, ``7``, ``6``) from a numeral."""

	for mark in _EXTENSION_MARKS:
		numeral = numeral.replace(mark, "")

	return numeral


def roman_to_note (numeral: str) -> str:

	"""Return the root note name for a plain roman numeral.

	Example:
		```python
		roman_to_note("V7")    # → "G"
		roman_to_note("bVII")  # → "Bb"
		roman_to_note("iv")    # → "C"  (not in the table)
		```
	"""

	return ROMAN_TO_NOTE.get(strip_extensions(numeral), FALLBACK_ROOT)


def secondary_chord_root (label: str) -> typing.Optional[int]:

	"""Return the root pitch class of a secondary chord label such as ``"V/V"``.

	The target numeral after the slash is resolved first, then shifted by the
	interval associated with the function before the slash. Unknown functions
	leave the target's root unshifted. Returns None when the label is not a
	two-part slash label.
	"""

	parts = label.split("/")

	if len(parts) != 2:
		return None

	function, target = parts
	target_pc = chordwalk.notes.note_to_int(roman_to_note(target))
	shift = SECONDARY_FUNCTION_SHIFTS.get(strip_extensions(function), 0)

	return (target_pc + shift) % 12


def chord_root_pc (label: str) -> int:

	"""Return the root pitch class (0-11) for any chord label.

	Example:
		```python
		chord_root_pc("V/V")     # → 2   (D, the dominant of G)
		chord_root_pc("viio/vi") # → 8   (G#, leading tone of A)
		chord_root_pc("bIII7")   # → 3
		```
	"""

	secondary = secondary_chord_root(label)

	if secondary is not None:
		return secondary

	return chordwalk.notes.note_to_int(roman_to_note(label))


def chord_root_name (label: str, use_flats: bool = False) -> str:

	"""Return the spelled root note for a chord label."""

	return chordwalk.notes.int_to_note(chord_root_pc(label), use_flats=use_flats)


def root_proximity (label_a: str, label_b: str) -> int:

	"""Return the circular distance (0-6) between the roots of two labels."""

	return chordwalk.notes.circular_distance(chord_root_pc(label_a), chord_root_pc(label_b))


def sort_by_proximity (target: str, candidates: typing.Iterable[str]) -> typing.List[str]:

	"""Order candidate labels by root distance to the target, then by label length."""

	return sorted(candidates, key=lambda label: (root_proximity(label, target), len(label)))


def are_chords_enharmonically_close (label_a: str, label_b: str) -> bool:

	"""Return True when two labels share a root pitch class."""

	return chord_root_pc(label_a) == chord_root_pc(label_b)
