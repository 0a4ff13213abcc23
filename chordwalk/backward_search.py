"""Backward random walks that end on a fixed chord.

Starting from the target, each step prepends a chord that was observed to
precede the current first chord, weighted by how often it did. The walk stops
early when the first chord has no recorded predecessor, so results can be
shorter than requested.
"""

import random
import typing

import chordwalk.transition_graph


def build_backward_path (
	target: str,
	length: int,
	backward_graph: chordwalk.transition_graph.TransitionGraph,
	rng: random.Random
) -> typing.List[str]:

	"""Return a path of up to ``length`` chords ending on ``target``.

	The path is ordered oldest first with ``target`` last. A chord is not
	preceded by itself unless it is its only recorded predecessor.

	Example:
		```python
		_, backward = build_graphs(progressions, index)
		build_backward_path("vi", 4, backward, random.Random(3))  # e.g. ["I", "IV", "V", "vi"]
		build_backward_path("I", 4, empty_graph, rng)              # → ["I"]
		```
	"""

	path = [target]

	for _ in range(length - 1):
		head = path[0]
		predecessor = backward_graph.choose_next(head, rng, exclude=head)

		if predecessor is None:
			break

		path.insert(0, predecessor)

	return path
