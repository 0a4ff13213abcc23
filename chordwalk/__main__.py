import argparse
import logging
import os
import random
import typing

import yaml

import chordwalk.corpus
import chordwalk.loader
import chordwalk.modulation
import chordwalk.similarity
import chordwalk.synthesis


logger = logging.getLogger(__name__)

DEFAULT_CHORDS_PATH = "data/chordSymbols.json"
DEFAULT_PROGRESSIONS_PATH = "data/chordProgressions.json"


def load_config (config_path: str = "config.yaml") -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, "r") as f:
		return yaml.safe_load(f) or {}


def settings_from_config (config: dict) -> chordwalk.modulation.ModulationSettings:

	"""
	Build modulation settings from the ``modulation`` section of a config.
	"""

	section = config.get("modulation", {}) or {}

	return chordwalk.modulation.ModulationSettings(
		attempts = section.get("attempts", chordwalk.modulation.DEFAULT_ATTEMPTS),
		max_rounds = section.get("max_rounds", chordwalk.modulation.DEFAULT_MAX_ROUNDS),
		similarity_threshold = section.get("similarity_threshold", chordwalk.similarity.DEFAULT_SIMILARITY_THRESHOLD)
	)


def build_parser () -> argparse.ArgumentParser:

	"""Return the command line parser."""

	parser = argparse.ArgumentParser(prog="chordwalk", description="Learn chord transitions from a corpus and generate progressions")
	parser.add_argument("--config", default="config.yaml", help="YAML config file (default: config.yaml)")
	parser.add_argument("--chords", help="Chord catalog JSON file")
	parser.add_argument("--progressions", help="Progression corpus JSON file")
	parser.add_argument("--seed", type=int, help="Seed for repeatable output")
	parser.add_argument("--verbose", action="store_true", help="Log debug details")

	commands = parser.add_subparsers(dest="command", required=True)

	generate = commands.add_parser("generate", help="Synthesize a progression")
	generate.add_argument("--length", help="Number of chords, or a range such as 3-6")

	modulate = commands.add_parser("modulate", help="Find paths from one chord to another")
	modulate.add_argument("start")
	modulate.add_argument("target")
	modulate.add_argument("--length", type=int, default=chordwalk.synthesis.DEFAULT_LENGTH)

	similar = commands.add_parser("similar", help="List chords similar to a chord")
	similar.add_argument("label")
	similar.add_argument("--threshold", type=float, default=None)

	commands.add_parser("pairs", help="Print chord pair counts")
	commands.add_parser("firsts", help="Print opening chord frequencies")

	return parser


def main (argv: typing.Optional[typing.List[str]] = None) -> None:

	"""
	Main entry point for the chordwalk command line.
	"""

	args = build_parser().parse_args(argv)

	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

	config = load_config(args.config)
	data = config.get("data", {}) or {}
	generation = config.get("generation", {}) or {}

	seed = args.seed if args.seed is not None else generation.get("seed")
	rng = random.Random(seed)

	chords = chordwalk.loader.load_chords(args.chords or data.get("chords", DEFAULT_CHORDS_PATH))
	progressions = chordwalk.loader.load_progressions(args.progressions or data.get("progressions", DEFAULT_PROGRESSIONS_PATH))

	corpus = chordwalk.corpus.ChordCorpus(chords, progressions, rng=rng, settings=settings_from_config(config))

	unknown = corpus.unknown_labels()

	if unknown:
		logger.warning(f"Corpus uses chords missing from the catalog: {', '.join(unknown)}")

	if args.command == "generate":
		default_length = generation.get("length", chordwalk.synthesis.DEFAULT_LENGTH)
		length = chordwalk.synthesis.parse_length(args.length, rng, default=default_length)
		progression = corpus.generate(length)

		if not progression:
			print("No suitable progressions found to build from.")
		else:
			print(" - ".join(progression))

	elif args.command == "modulate":
		paths = corpus.modulate(args.start, args.target, args.length)

		if not paths:
			print(f"No modulation found from {args.start} to {args.target}.")

		for path in paths:
			print(" - ".join(path))

	elif args.command == "similar":
		threshold = args.threshold if args.threshold is not None else corpus.settings.similarity_threshold
		print(", ".join(corpus.similar(args.label, threshold=threshold)) or "No similar chords found.")

	elif args.command == "pairs":
		for pair, count in sorted(corpus.pair_counts().items(), key=lambda item: -item[1]):
			print(f"{pair.source} -> {pair.target} : {count} times")

	elif args.command == "firsts":
		for label, share in sorted(corpus.first_chord_frequencies().items(), key=lambda item: -item[1]):
			print(f"{label}: {share:.1%}")


if __name__ == "__main__":
	main()
