"""Searching for chord paths that lead from one chord to another.

Two strategies generate candidate paths that end on the target chord:

- **Direct**: a single backward walk from the target.
- **Common tone**: the second half is a backward walk from the target; the
  first half is a backward walk to a *bridge* chord, picked among the chords
  that sound close to where the second half begins. The halves are joined
  without removing a repeated chord at the seam.

``ModulationPlanner.build_modulation`` tries the direct strategy first, in
rounds of attempts, keeping paths that begin on the start chord. Only when no
round succeeds does it try the common-tone strategy, which must also hit the
requested length exactly (either half may stop short). When neither strategy
succeeds within budget the result is an empty list.
"""

import dataclasses
import logging
import random
import typing

import chordwalk.backward_search
import chordwalk.models
import chordwalk.similarity
import chordwalk.transition_graph


logger = logging.getLogger(__name__)

DEFAULT_ATTEMPTS = 10
DEFAULT_MAX_ROUNDS = 10

Path = typing.List[str]


@dataclasses.dataclass
class ModulationSettings:

	"""
	Search budget and bridge selection settings.

	Attributes:
		attempts: Paths generated per round.
		max_rounds: Rounds tried per strategy before giving up.
		similarity_threshold: Minimum similarity for a bridge chord (0 to 1).
	"""

	attempts: int = DEFAULT_ATTEMPTS
	max_rounds: int = DEFAULT_MAX_ROUNDS
	similarity_threshold: float = chordwalk.similarity.DEFAULT_SIMILARITY_THRESHOLD


	def __post_init__ (self) -> None:

		"""Reject budgets and thresholds that cannot drive a search."""

		if self.attempts < 0:
			raise ValueError("Attempts must not be negative")

		if self.max_rounds < 0:
			raise ValueError("Max rounds must not be negative")

		if self.similarity_threshold < 0 or self.similarity_threshold > 1:
			raise ValueError("Similarity threshold must be between 0 and 1")


class ModulationPlanner:

	"""Connects a start chord to a target chord using a corpus's backward graph."""

	def __init__ (
		self,
		backward_graph: chordwalk.transition_graph.TransitionGraph,
		pool: typing.Sequence[chordwalk.models.Chord],
		rng: typing.Optional[random.Random] = None,
		settings: typing.Optional[ModulationSettings] = None
	) -> None:

		"""
		Initialize the planner.

		Parameters:
			backward_graph: Predecessor counts learned from the corpus.
			pool: Catalog chords considered as bridge chords.
			rng: Optional seeded ``random.Random`` for repeatable searches.
			settings: Search budget; defaults to 10 rounds of 10 attempts.
		"""

		self.backward_graph = backward_graph
		self.pool = list(pool)
		self.rng = rng or random.Random()
		self.settings = settings or ModulationSettings()


	def direct_modulation_paths (self, target: str, length: int, attempts: typing.Optional[int] = None) -> typing.List[Path]:

		"""
		Return independent backward walks ending on ``target``.
		"""

		if attempts is None:
			attempts = self.settings.attempts

		return [
			chordwalk.backward_search.build_backward_path(target, length, self.backward_graph, self.rng)
			for _ in range(attempts)
		]


	def common_tone_modulation_paths (self, target: str, length: int, attempts: typing.Optional[int] = None) -> typing.List[Path]:

		"""
		Return paths made of a walk to a bridge chord followed by a walk to ``target``.

		The second half has ``length // 2`` chords and the first half the rest.
		Attempts that find no bridge chord produce no path, so fewer than
		``attempts`` paths may come back.
		"""

		if attempts is None:
			attempts = self.settings.attempts

		tail_length = length // 2
		head_length = length - tail_length
		paths: typing.List[Path] = []

		if tail_length == 0:
			return paths

		for _ in range(attempts):
			tail = chordwalk.backward_search.build_backward_path(target, tail_length, self.backward_graph, self.rng)

			bridges = chordwalk.similarity.find_similar(
				tail[0],
				self.pool,
				self.rng,
				threshold = self.settings.similarity_threshold
			)

			if not bridges:
				continue

			bridge = self.rng.choice(bridges)
			head = chordwalk.backward_search.build_backward_path(bridge, head_length, self.backward_graph, self.rng)

			paths.append(head + tail)

		return paths


	def build_modulation (self, start: str, target: str, length: int) -> typing.List[Path]:

		"""Search for paths of ``length`` chords from ``start`` to ``target``.

		Returns the distinct accepted paths from the first successful round, or
		an empty list when the budget runs out.

		Example:
			```python
			planner = ModulationPlanner(backward, chords, rng=random.Random(1))
			planner.build_modulation("I", "vi", 4)  # e.g. [["I", "IV", "V", "vi"]]
			```
		"""

		accepted = self._search(
			lambda: self.direct_modulation_paths(target, length),
			lambda path: path[0] == start
		)

		if accepted:
			logger.info(f"Direct modulation {start} → {target} found {len(accepted)} path(s)")
			return accepted

		accepted = self._search(
			lambda: self.common_tone_modulation_paths(target, length),
			lambda path: path[0] == start and len(path) == length
		)

		if accepted:
			logger.info(f"Common-tone modulation {start} → {target} found {len(accepted)} path(s)")

		else:
			logger.info(f"No modulation found from {start} to {target} in {length} chords")

		return accepted


	def _search (
		self,
		generate: typing.Callable[[], typing.List[Path]],
		accept: typing.Callable[[Path], bool]
	) -> typing.List[Path]:

		"""Run generation rounds until one yields an accepted path or the rounds run out."""

		for round_number in range(self.settings.max_rounds):
			accepted: typing.List[Path] = []

			for path in generate():
				if path and accept(path) and path not in accepted:
					accepted.append(path)

			if accepted:
				logger.debug(f"Accepted {len(accepted)} path(s) in round {round_number + 1}")
				return accepted

		return []
