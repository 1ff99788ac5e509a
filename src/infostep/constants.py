"""Constants for infostep."""

# Brand palette
BRAND_PRIMARY = "#034F80"  # Deep Ocean Blue
BRAND_TEXT = "#1A2633"  # Midnight Navy
BRAND_MUTED = "#818181"  # Sleek Gray

# (id, label, description)
LAYOUT_OPTIONS = [
    ("vertical-cards", "Transformative Flow", "Deep narrative evolution"),
    ("horizontal-steps", "Clarity Roadmap", "Linear structural progression"),
    ("radial-process", "Central Integrity", "Unified core mission"),
    ("timeline-flow", "Legacy Path", "Empowered historical journey"),
    ("circular-progress", "Eternal Orbit", "Sustainable human-centered loop"),
    ("multi-column", "Information Matrix", "Complex data empowered"),
]

# Default console width for exports (columns)
EXPORT_WIDTH = 100
