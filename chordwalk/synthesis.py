"""Forward random-walk progression synthesis.

The walk starts on a randomly chosen opening chord and follows the forward
graph, weighting each step by how often the transition was observed. When the
walk reaches a chord with no recorded successor it jumps to a fresh opening
chord, so the result always has the requested length.
"""

import logging
import random
import typing

import chordwalk.transition_graph


logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 4


def build_progression (
	start_candidates: typing.Sequence[str],
	forward_graph: chordwalk.transition_graph.TransitionGraph,
	length: int,
	rng: random.Random
) -> typing.List[str]:

	"""Generate a progression of ``length`` chords.

	Parameters:
		start_candidates: Opening chords to pick from (repeats weight the pick).
		forward_graph: Successor counts learned from the corpus.
		length: Number of chords to produce.
		rng: Random source for every choice.

	Returns:
		The chord labels, or an empty list when there is nothing to start from
		or ``length`` is not positive.

	Example:
		```python
		forward, _ = build_graphs(progressions, index)
		starts = start_candidates(progressions, index)
		build_progression(starts, forward, 4, random.Random(7))  # e.g. ["I", "IV", "V", "I"]
		```
	"""

	if length <= 0:
		return []

	if not start_candidates:
		logger.warning("No start candidates available; returning an empty progression")
		return []

	current = rng.choice(start_candidates)
	progression = [current]

	while len(progression) < length:
		following = forward_graph.choose_next(current, rng)

		if following is None:
			# Dead end: restart from a new opening chord.
			following = rng.choice(start_candidates)

		current = following
		progression.append(current)

	return progression


def parse_length (text: typing.Optional[str], rng: random.Random, default: int = DEFAULT_LENGTH) -> int:

	"""Parse a requested length such as ``"4"`` or a range such as ``"3-6"``.

	A range yields a uniformly random length within its inclusive bounds.
	Blank, non-numeric or non-positive input falls back to ``default``.
	"""

	if text is None or not text.strip():
		return default

	text = text.strip()

	if "-" in text:
		parts = text.split("-")

		if len(parts) == 2 and parts[0].strip().isdigit() and parts[1].strip().isdigit():
			low = int(parts[0])
			high = int(parts[1])

			if 0 < low <= high:
				return rng.randint(low, high)

		logger.warning(f"Invalid length range {text!r}; using {default}")
		return default

	if text.isdigit() and int(text) > 0:
		return int(text)

	logger.warning(f"Invalid length {text!r}; using {default}")
	return default
