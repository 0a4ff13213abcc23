"""A chord catalog and progression corpus with the operations built on them."""

import logging
import random
import typing

import chordwalk.canonical
import chordwalk.filters
import chordwalk.models
import chordwalk.modulation
import chordwalk.similarity
import chordwalk.synthesis
import chordwalk.transition_graph


logger = logging.getLogger(__name__)


class ChordCorpus:

	"""Holds the catalog, the corpus and the shared random source.

	The canonical index and transition graphs are rebuilt from the current
	catalog and corpus on every request, so appending a chord or progression
	takes effect on the next call.
	"""

	def __init__ (
		self,
		chords: typing.Sequence[chordwalk.models.Chord],
		progressions: typing.Sequence[chordwalk.models.Progression],
		rng: typing.Optional[random.Random] = None,
		settings: typing.Optional[chordwalk.modulation.ModulationSettings] = None
	) -> None:

		"""
		Initialize the corpus.

		Parameters:
			chords: Catalog chords, in registration order.
			progressions: Corpus progressions.
			rng: Optional seeded ``random.Random`` for repeatable output.
			settings: Modulation search settings (default budget when omitted).
		"""

		self.chords = list(chords)
		self.progressions = list(progressions)
		self.rng = rng or random.Random()
		self.settings = settings or chordwalk.modulation.ModulationSettings()


	def index (self) -> chordwalk.canonical.CanonicalIndex:

		"""Return the alias → canonical label mapping for the catalog."""

		return chordwalk.canonical.build_index(self.chords)


	def graphs (self) -> typing.Tuple[chordwalk.transition_graph.TransitionGraph, chordwalk.transition_graph.TransitionGraph]:

		"""Return freshly built ``(forward, backward)`` transition graphs."""

		return chordwalk.transition_graph.build_graphs(self.progressions, self.index())


	def transition_map (self) -> typing.Dict[str, typing.List[str]]:

		"""Return chord → following chords, one entry per observed transition."""

		forward, _ = self.graphs()

		return forward.neighbor_lists()


	def pair_counts (self) -> typing.Dict[chordwalk.models.ChordPair, int]:

		"""Return how often each chord pair occurs."""

		return chordwalk.transition_graph.count_pairs(self.progressions, self.index())


	def pair_frequencies (self) -> typing.Dict[chordwalk.models.ChordPair, float]:

		"""Return each chord pair's share of all pairs."""

		return chordwalk.transition_graph.pair_frequencies(self.progressions, self.index())


	def first_chord_frequencies (self) -> typing.Dict[str, float]:

		"""Return each opening chord's share of all openings."""

		return chordwalk.transition_graph.first_chord_frequencies(self.progressions, self.index())


	def unknown_labels (self) -> typing.List[str]:

		"""Return corpus labels that no catalog chord claims."""

		return chordwalk.canonical.unknown_labels(self.progressions, self.index())


	def generate (self, length: int = chordwalk.synthesis.DEFAULT_LENGTH) -> typing.List[str]:

		"""Synthesize a new progression of ``length`` chords."""

		index = self.index()
		forward, _ = chordwalk.transition_graph.build_graphs(self.progressions, index)
		starts = chordwalk.canonical.start_candidates(self.progressions, index)

		return chordwalk.synthesis.build_progression(starts, forward, length, self.rng)


	def planner (self) -> chordwalk.modulation.ModulationPlanner:

		"""Return a modulation planner over the current corpus."""

		_, backward = self.graphs()

		return chordwalk.modulation.ModulationPlanner(backward, self.chords, rng=self.rng, settings=self.settings)


	def modulate (self, start: str, target: str, length: int) -> typing.List[typing.List[str]]:

		"""Search for paths from ``start`` to ``target`` of ``length`` chords.

		Aliases are accepted for both chords and resolved to canonical labels.
		"""

		index = self.index()
		start = chordwalk.canonical.canonicalize(start, index)
		target = chordwalk.canonical.canonicalize(target, index)

		return self.planner().build_modulation(start, target, length)


	def similar (
		self,
		label: str,
		threshold: float = chordwalk.similarity.DEFAULT_SIMILARITY_THRESHOLD
	) -> typing.List[str]:

		"""Return catalog chords scoring at least ``threshold`` against ``label``."""

		return chordwalk.similarity.find_similar(label, self.chords, self.rng, threshold=threshold)


	def filtered (self, **criteria: typing.Any) -> "ChordCorpus":

		"""Return a corpus restricted by metadata, sharing this corpus's catalog, rng and settings.

		Accepts the keyword arguments of ``chordwalk.filters.filter_progressions``.
		"""

		selected = chordwalk.filters.filter_progressions(self.progressions, **criteria)
		logger.debug(f"Filter kept {len(selected)} of {len(self.progressions)} progressions")

		return ChordCorpus(self.chords, selected, rng=self.rng, settings=self.settings)
