"""
Dialectic - Philosophical RPG engine.

Players make moral choices that move an authenticity metric, drift
between philosophical alignments, and duel enemies by judging whether
syllogisms are valid.

Packages:
    engine_core  Authenticity, alignment, combat and loadout rules
    content      Scenarios, syllogisms, enemies, fallacies and items
    session      Player records and persistence
    api          HTTP interface for the game client
"""

__version__ = "0.1.0"
