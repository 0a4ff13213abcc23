"""Forward and backward chord transition graphs built from a corpus.

Edges carry observed multiplicities rather than probabilities. The forward
graph maps a chord to the chords that followed it; the backward graph maps a
chord to the chords that preceded it. Both are built in the same pass, so
every forward edge A → B with count n has a backward edge B ← A with count n.
"""

import logging
import random
import typing

import chordwalk.canonical
import chordwalk.models


logger = logging.getLogger(__name__)

StateType = typing.TypeVar("StateType")
KeyType = typing.TypeVar("KeyType")


def choose_weighted (options: typing.Sequence[typing.Tuple[StateType, int]], rng: random.Random) -> StateType:

	"""
	Choose one item from a list of weighted options.

	A roll is drawn uniformly from ``[0, total)`` and the first option whose
	running total exceeds the roll is returned, so each option is picked with
	probability proportional to its weight.
	"""

	if not options:
		raise ValueError("Options cannot be empty")

	total_weight = 0

	for _, weight in options:
		if weight <= 0:
			raise ValueError("Weights must be positive")
		total_weight += weight

	roll = rng.random() * total_weight
	accum = 0

	for option, weight in options:
		accum += weight
		if accum > roll:
			return option

	return options[-1][0]


class TransitionGraph:

	"""
	A directed multigraph over chord labels with counted edges.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty graph.
		"""

		self._edges: typing.Dict[str, typing.Dict[str, int]] = {}


	def add_transition (self, source: str, target: str, weight: int = 1) -> None:

		"""
		Record a transition, accumulating onto any existing edge.
		"""

		if weight <= 0:
			raise ValueError("Weight must be positive")

		targets = self._edges.setdefault(source, {})
		targets[target] = targets.get(target, 0) + weight


	def get_transitions (self, source: str) -> typing.List[typing.Tuple[str, int]]:

		"""
		Return (neighbor, count) pairs for a node in first-recorded order.
		"""

		if source not in self._edges:
			return []

		return list(self._edges[source].items())


	def count (self, source: str, target: str) -> int:

		"""Return the multiplicity of one edge (0 when absent)."""

		return self._edges.get(source, {}).get(target, 0)


	def nodes (self) -> typing.List[str]:

		"""Return every node with at least one outgoing edge."""

		return list(self._edges)


	def edges (self) -> typing.Iterator[typing.Tuple[str, str, int]]:

		"""Yield (source, target, count) for every edge."""

		for source, targets in self._edges.items():
			for target, weight in targets.items():
				yield source, target, weight


	def total_weight (self) -> int:

		"""Return the sum of all edge counts."""

		return sum(weight for _, _, weight in self.edges())


	def frequencies (self) -> typing.Dict[chordwalk.models.ChordPair, float]:

		"""
		Return each edge's share of all counted transitions.

		An empty graph returns an empty mapping.
		"""

		total = self.total_weight()

		if total == 0:
			return {}

		return {
			chordwalk.models.ChordPair(source, target): weight / total
			for source, target, weight in self.edges()
		}


	def neighbor_lists (self) -> typing.Dict[str, typing.List[str]]:

		"""
		Return node → neighbor list, each neighbor repeated once per observation.
		"""

		return {
			source: [target for target, weight in targets.items() for _ in range(weight)]
			for source, targets in self._edges.items()
		}


	def choose_next (self, source: str, rng: random.Random, exclude: typing.Optional[str] = None) -> typing.Optional[str]:

		"""
		Choose a neighbor of ``source`` with probability proportional to edge count.

		When ``exclude`` is given it is dropped from the candidates, unless it is
		the only candidate. Returns None when the node has no edges.
		"""

		options = self.get_transitions(source)

		if not options:
			return None

		if exclude is not None:
			remaining = [(target, weight) for target, weight in options if target != exclude]

			if remaining:
				options = remaining

		return choose_weighted(options, rng)


	def __contains__ (self, node: object) -> bool:

		return node in self._edges


	def __len__ (self) -> int:

		return len(self._edges)


def _sequence_pairs (sequence: typing.List[str], loop: bool) -> typing.Iterator[typing.Tuple[str, str]]:

	"""Yield each adjacent pair of a flattened sequence, plus the wrap pair for loops."""

	for index in range(len(sequence) - 1):
		yield sequence[index], sequence[index + 1]

	if loop and len(sequence) > 1:
		yield sequence[-1], sequence[0]


def build_graphs (
	progressions: typing.Iterable[chordwalk.models.Progression],
	index: chordwalk.canonical.CanonicalIndex
) -> typing.Tuple[TransitionGraph, TransitionGraph]:

	"""Build the forward and backward graphs for a corpus.

	Parameters:
		progressions: The corpus to learn from.
		index: Alias → canonical label mapping used to flatten each progression.

	Returns:
		``(forward, backward)``. ``forward`` maps a chord to its successors,
		``backward`` maps a chord to its predecessors.

	Example:
		```python
		loop = Progression(bars=[[["I"]], [["V"]], [["vi"]]], type_tag="Loop")
		forward, backward = build_graphs([loop], {})
		forward.get_transitions("vi")  # → [("I", 1)]
		backward.get_transitions("I")  # → [("vi", 1)]
		```
	"""

	forward = TransitionGraph()
	backward = TransitionGraph()
	progression_count = 0

	for progression in progressions:
		progression_count += 1
		sequence = chordwalk.canonical.flatten(progression, index)

		for source, target in _sequence_pairs(sequence, progression.is_loop):
			forward.add_transition(source, target)
			backward.add_transition(target, source)

	logger.debug(f"Built transition graphs from {progression_count} progressions ({forward.total_weight()} transitions)")

	return forward, backward


def count_pairs (
	progressions: typing.Iterable[chordwalk.models.Progression],
	index: chordwalk.canonical.CanonicalIndex
) -> typing.Dict[chordwalk.models.ChordPair, int]:

	"""Count how often each ordered chord pair occurs, loop wraps included."""

	counts: typing.Dict[chordwalk.models.ChordPair, int] = {}

	for progression in progressions:
		sequence = chordwalk.canonical.flatten(progression, index)

		for source, target in _sequence_pairs(sequence, progression.is_loop):
			pair = chordwalk.models.ChordPair(source, target)
			counts[pair] = counts.get(pair, 0) + 1

	return counts


def pair_frequencies (
	progressions: typing.Iterable[chordwalk.models.Progression],
	index: chordwalk.canonical.CanonicalIndex
) -> typing.Dict[chordwalk.models.ChordPair, float]:

	"""Return each chord pair's share of all counted pairs."""

	return _normalize(count_pairs(progressions, index))


def count_first_chords (
	progressions: typing.Iterable[chordwalk.models.Progression],
	index: chordwalk.canonical.CanonicalIndex
) -> typing.Dict[str, int]:

	"""Count how often each chord opens a progression."""

	counts: typing.Dict[str, int] = {}

	for label in chordwalk.canonical.start_candidates(progressions, index):
		counts[label] = counts.get(label, 0) + 1

	return counts


def first_chord_frequencies (
	progressions: typing.Iterable[chordwalk.models.Progression],
	index: chordwalk.canonical.CanonicalIndex
) -> typing.Dict[str, float]:

	"""Return each opening chord's share of all progression openings."""

	return _normalize(count_first_chords(progressions, index))


def _normalize (counts: typing.Dict[KeyType, int]) -> typing.Dict[KeyType, float]:

	"""Divide every count by the total; empty or zero totals give an empty mapping."""

	total = sum(counts.values())

	if total == 0:
		return {}

	return {key: count / total for key, count in counts.items()}
