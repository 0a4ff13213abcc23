"""Generate progressions and modulation paths from the bundled sample corpus.

Run from the repository root:

	python examples/modulation.py
"""

import logging
import random

import chordwalk.corpus
import chordwalk.loader
import chordwalk.modulation


logging.basicConfig(level=logging.INFO)


def main () -> None:

	chords = chordwalk.loader.load_chords("data/chordSymbols.json")
	progressions = chordwalk.loader.load_progressions("data/chordProgressions.json")

	corpus = chordwalk.corpus.ChordCorpus(
		chords,
		progressions,
		rng = random.Random(2024),
		settings = chordwalk.modulation.ModulationSettings(attempts=10, max_rounds=5)
	)

	# Four fresh progressions from the whole corpus.
	for _ in range(4):
		print(" - ".join(corpus.generate(4)))

	# Only the jazz progressions.
	jazz = corpus.filtered(genres=["Jazz"])
	print("Jazz:", " - ".join(jazz.generate(6)))

	# Paths from the tonic to the relative minor, then somewhere harder to reach.
	for start, target, length in (("I", "vi", 4), ("ii", "bVII", 5)):
		paths = corpus.modulate(start, target, length)

		if not paths:
			print(f"{start} → {target}: nothing found")

		for path in paths:
			print(f"{start} → {target}:", " - ".join(path))


if __name__ == "__main__":
	main()
