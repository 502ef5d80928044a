"""
Detection Constants
"""

# Flight categories
CATEGORY_TRANSPORT = "transport"
CATEGORY_FIGHTER = "fighter"
CATEGORY_RECON = "recon"
CATEGORY_OTHER = "other"

# Declared aircraft types, as reported by upstream feeds
TRANSPORT_AIRCRAFT_TYPES = frozenset({"transport", "tanker"})
FIGHTER_AIRCRAFT_TYPES = frozenset({"fighter"})
RECON_AIRCRAFT_TYPES = frozenset({"reconnaissance", "awacs"})

# Surge types
SURGE_AIRLIFT = "airlift"
SURGE_FIGHTER = "fighter"
SURGE_RECONNAISSANCE = "reconnaissance"  # Modeled, never raised by the detector

# Histogram key when neither model nor type is known
UNKNOWN_AIRCRAFT = "unknown"
