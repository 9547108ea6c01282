"""
Knight's Quest, a turn-based text adventure.

The hero explores, rests and fights randomly encountered enemies until
victory, flight or death.
"""
