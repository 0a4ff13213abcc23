"""
Chordwalk - learn chord transitions from a corpus of progressions.

Progressions are read as sequences of roman numeral chord labels. From them
chordwalk counts which chords follow (and precede) which, and uses those
counts to:

- **Synthesize progressions.** A weighted random walk over the forward
  graph, restarting on an opening chord whenever it reaches a dead end.
- **Plan modulations.** Backward walks that end on a target chord, kept when
  they begin on the requested start chord, with a fallback that joins two
  walks through a harmonically similar bridge chord.
- **Compare chords.** A similarity score mixing root distance, shared chord
  tones and a rough quality match.

Every random decision takes an explicit ``random.Random``, so a seeded
generator makes any result repeatable.

Package-level exports: ``Chord``, ``Progression``, ``ChordCorpus``, ``ModulationPlanner``.
"""

import chordwalk.corpus
import chordwalk.models
import chordwalk.modulation


Chord = chordwalk.models.Chord
Progression = chordwalk.models.Progression
ChordCorpus = chordwalk.corpus.ChordCorpus
ModulationPlanner = chordwalk.modulation.ModulationPlanner
