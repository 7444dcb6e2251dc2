"""Group-level facts about the 24 cube rotations."""
