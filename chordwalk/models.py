"""Chord catalog and progression corpus records.

A `Chord` is identified by its roman numeral; the symbol and synonyms are
aliases that resolve to it. A `Progression` nests chord labels three levels
deep: bars, then beats, then the labels sounding together on that beat.
"""

import dataclasses
import enum
import typing


LOOP_TAG = "Loop"


class ProgressionType (enum.Enum):

	"""Whether a progression wraps from its last chord back to its first."""

	LINEAR = "linear"
	LOOP = "loop"


	@classmethod
	def from_tag (cls, tag: typing.Optional[str]) -> "ProgressionType":

		"""Convert a free-form type tag; only the exact tag ``"Loop"`` marks a loop."""

		return cls.LOOP if tag == LOOP_TAG else cls.LINEAR


@dataclasses.dataclass
class Chord:

	"""
	A catalog chord.

	Attributes:
		roman_numeral: Canonical label (e.g. ``"V7"``).
		symbol: Display symbol (e.g. ``"G7"``).
		notes: Note names, bass first.
		synonyms: Further aliases for the chord.
	"""

	roman_numeral: str
	symbol: str = ""
	notes: typing.List[str] = dataclasses.field(default_factory=list)
	synonyms: typing.List[str] = dataclasses.field(default_factory=list)


	def all_names (self) -> typing.List[str]:

		"""Return every non-empty alias (symbol, roman numeral, synonyms) once, in that order."""

		names: typing.List[str] = []

		for name in [self.symbol, self.roman_numeral, *self.synonyms]:
			if name and name not in names:
				names.append(name)

		return names


@dataclasses.dataclass
class Progression:

	"""
	A progression from the corpus, with its descriptive metadata.

	``type_tag`` keeps the raw tag for display and filtering; ``kind`` is the
	validated form used when building graphs.
	"""

	bars: typing.List[typing.List[typing.List[str]]]
	name: typing.Optional[str] = None
	year: typing.Optional[int] = None
	period: typing.Optional[str] = None
	genres: typing.List[str] = dataclasses.field(default_factory=list)
	composer: typing.Optional[str] = None
	artist: typing.Optional[str] = None
	type_tag: typing.Optional[str] = None
	kind: typing.Optional[ProgressionType] = None


	def __post_init__ (self) -> None:

		"""Derive the progression kind from the raw tag when not given explicitly."""

		if self.kind is None:
			self.kind = ProgressionType.from_tag(self.type_tag)


	@property
	def is_loop (self) -> bool:

		"""Return True when the progression wraps around."""

		return self.kind is ProgressionType.LOOP


@dataclasses.dataclass(frozen=True)
class ChordPair:

	"""An ordered (from, to) pair of canonical labels, used as a counting key."""

	source: str
	target: str
