"""Reading and writing the chord catalog and progression corpus as JSON.

Records use the field names ``symbol``, ``romanNumeral``, ``notes`` and
``synonyms`` for chords, and ``name``, ``year``, ``period``, ``genre``,
``composer``, ``artist``, ``type`` and ``bars`` for progressions. Field names
are matched case-insensitively, so ``RomanNumeral`` is read the same way.
A record missing ``romanNumeral`` or ``bars`` raises ``KeyError``.
"""

import json
import logging
import os
import typing

import chordwalk.models
import chordwalk.notes


logger = logging.getLogger(__name__)


def _fold_keys (data: typing.Dict[str, typing.Any]) -> typing.Dict[str, typing.Any]:

	"""Return the record with lower-cased field names."""

	return {key.lower(): value for key, value in data.items()}


def _note_name (note: typing.Union[str, int]) -> str:

	"""Accept a note name, or a pitch class integer which is spelled with sharps."""

	if isinstance(note, int):
		return chordwalk.notes.int_to_note(note)

	return note


def chord_from_dict (data: typing.Dict[str, typing.Any]) -> chordwalk.models.Chord:

	"""
	Build a chord from a catalog record.
	"""

	fields = _fold_keys(data)

	return chordwalk.models.Chord(
		roman_numeral = fields["romannumeral"],
		symbol = fields.get("symbol") or "",
		notes = [_note_name(note) for note in fields.get("notes") or []],
		synonyms = list(fields.get("synonyms") or [])
	)


def chord_to_dict (chord: chordwalk.models.Chord) -> typing.Dict[str, typing.Any]:

	"""
	Return the catalog record for a chord.
	"""

	return {
		"symbol": chord.symbol,
		"romanNumeral": chord.roman_numeral,
		"notes": list(chord.notes),
		"synonyms": list(chord.synonyms),
	}


def progression_from_dict (data: typing.Dict[str, typing.Any]) -> chordwalk.models.Progression:

	"""Build a progression from a corpus record.

	``genre`` may be a single string or a list. The ``type`` tag is checked
	here, once: only ``"Loop"`` produces a looping progression.
	"""

	fields = _fold_keys(data)
	genre = fields.get("genre")

	if genre is None:
		genres: typing.List[str] = []

	elif isinstance(genre, str):
		genres = [genre]

	else:
		genres = list(genre)

	type_tag = fields.get("type")

	return chordwalk.models.Progression(
		bars = [[list(beat) for beat in bar] for bar in fields["bars"]],
		name = fields.get("name"),
		year = fields.get("year"),
		period = fields.get("period"),
		genres = genres,
		composer = fields.get("composer"),
		artist = fields.get("artist"),
		type_tag = type_tag,
		kind = chordwalk.models.ProgressionType.from_tag(type_tag)
	)


def progression_to_dict (progression: chordwalk.models.Progression) -> typing.Dict[str, typing.Any]:

	"""
	Return the corpus record for a progression, omitting unset metadata.
	"""

	record: typing.Dict[str, typing.Any] = {}

	for key, value in (
		("name", progression.name),
		("year", progression.year),
		("period", progression.period),
		("composer", progression.composer),
		("artist", progression.artist),
		("type", progression.type_tag),
	):
		if value is not None:
			record[key] = value

	if progression.genres:
		record["genre"] = list(progression.genres)

	record["bars"] = progression.bars

	return record


def _read_records (path: str) -> typing.List[typing.Dict[str, typing.Any]]:

	"""Read a JSON array from disk; a missing file reads as empty."""

	if not os.path.exists(path):
		logger.warning(f"Data file {path} not found. Using an empty list.")
		return []

	with open(path, "r", encoding="utf-8") as f:
		records = json.load(f)

	return records or []


def _write_records (path: str, records: typing.List[typing.Dict[str, typing.Any]]) -> None:

	"""Write a JSON array to disk with indentation."""

	with open(path, "w", encoding="utf-8") as f:
		json.dump(records, f, indent=2, ensure_ascii=False)


def load_chords (path: str) -> typing.List[chordwalk.models.Chord]:

	"""
	Load the chord catalog from a JSON file.
	"""

	chords = [chord_from_dict(record) for record in _read_records(path)]
	logger.debug(f"Loaded {len(chords)} chords from {path}")

	return chords


def load_progressions (path: str) -> typing.List[chordwalk.models.Progression]:

	"""
	Load the progression corpus from a JSON file.
	"""

	progressions = [progression_from_dict(record) for record in _read_records(path)]
	logger.debug(f"Loaded {len(progressions)} progressions from {path}")

	return progressions


def save_chords (path: str, chords: typing.Iterable[chordwalk.models.Chord]) -> None:

	"""
	Write the chord catalog to a JSON file.
	"""

	_write_records(path, [chord_to_dict(chord) for chord in chords])


def save_progressions (path: str, progressions: typing.Iterable[chordwalk.models.Progression]) -> None:

	"""
	Write the progression corpus to a JSON file.
	"""

	_write_records(path, [progression_to_dict(progression) for progression in progressions])


def register_chord (
	chords: typing.Sequence[chordwalk.models.Chord],
	chord: chordwalk.models.Chord
) -> typing.List[chordwalk.models.Chord]:

	"""Return a new catalog with ``chord`` appended.

	Existing chords are never replaced, so an alias the new chord shares with an
	earlier one still resolves to the earlier chord.
	"""

	logger.info(f"Registering chord {chord.roman_numeral} ({chord.symbol})")

	return [*chords, chord]
