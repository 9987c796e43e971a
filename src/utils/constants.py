"""Engine configuration constants."""

# Factions
SELF_FACTION_ID = 1  # Reserved id of the bot's own side
NEUTRAL_FACTION_ID = 0  # Wire value (besides null) meaning "unowned"

# Growth
GROWTH_PER_TURN = 1  # Ships produced per turn by any owned planet

# Planning
DEFAULT_STRATEGY = "greedy"
SEARCH_MODES = ("scan", "heap")
DEFAULT_SEARCH = "scan"
