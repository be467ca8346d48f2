"""
Configuration constants for the muscle volume model.

All fixed parameters are centralized here.  The window length and break
threshold are shared by the break detector and the rolling aggregator and
are intentionally not user-configurable.
"""

from typing import Final

# =============================================================================
# ROLLING WINDOW
# =============================================================================

ROLLING_WINDOW_DAYS: Final[int] = 7  # Inclusive window: the day itself + 6 preceding days
BREAK_THRESHOLD_DAYS: Final[int] = 7  # Gap (in calendar days) above which a break is flagged

# Running sums at or below this are treated as zero and evicted from the window
EVICTION_EPSILON: Final[float] = 1e-9

# =============================================================================
# CONTRIBUTION WEIGHTS
# =============================================================================

PRIMARY_WEIGHT: Final[float] = 1.0
SECONDARY_WEIGHT: Final[float] = 0.5
FULL_BODY_WEIGHT: Final[float] = 1.0

# =============================================================================
# MUSCLE GROUPS
# =============================================================================

GROUP_CARDIO: Final[str] = "Cardio"
GROUP_FULL_BODY: Final[str] = "Full Body"
GROUP_OTHER: Final[str] = "Other"

# Ordered list of anatomical groups for display
MUSCLE_GROUP_ORDER: Final[tuple[str, ...]] = (
    "Chest",
    "Back",
    "Shoulders",
    "Arms",
    "Legs",
    "Core",
)

# Substring patterns, checked in order; first hit wins
# (Shoulders before Back so "lateral deltoid" is not caught by "lat";
# Legs before Arms so "biceps femoris" is not caught by "bicep")
MUSCLE_GROUP_PATTERNS: Final[tuple[tuple[str, tuple[str, ...]], ...]] = (
    ("Chest", ("chest", "pec")),
    ("Shoulders", ("shoulder", "delto", "spinatus")),
    ("Back", ("lat", "upper back", "back", "lower back", "trap", "rhomboid", "erector", "teres")),
    ("Legs", ("leg", "quad", "hamstring", "glute", "calv", "thigh", "hip", "adductor", "abductor",
              "femoris", "vastus", "gastrocnemius", "soleus", "tibialis")),
    ("Arms", ("bicep", "tricep", "forearm", "arms", "brachi")),
    ("Core", ("abdom", "core", "waist", "oblique")),
    ("Cardio", ("cardio",)),
    ("Full Body", ("full body", "full-body")),
)

# Groups hit by a full-body set in group mode
FULL_BODY_GROUPS: Final[tuple[str, ...]] = ("Chest", "Back", "Legs", "Shoulders", "Arms", "Core")

# Named muscles hit by a full-body set in muscle mode
FULL_BODY_TARGET_MUSCLES: Final[tuple[str, ...]] = (
    "Chest",
    "Shoulders",
    "Triceps",
    "Biceps",
    "Forearms",
    "Lats",
    "Upper Back",
    "Lower Back",
    "Traps",
    "Abdominals",
    "Obliques",
    "Quadriceps",
    "Hamstrings",
    "Glutes",
    "Calves",
)

# =============================================================================
# BODY MAP IDENTIFIERS
# =============================================================================

# Catalog muscle name -> fine-grained body-map ids
MUSCLE_TO_BODY_MAP_IDS: Final[dict[str, tuple[str, ...]]] = {
    "Abdominals": ("lower-abdominals", "upper-abdominals"),
    "Abductors": ("gluteus-medius",),
    "Adductors": ("inner-thigh",),
    "Biceps": ("long-head-bicep", "short-head-bicep"),
    "Calves": ("gastrocnemius", "soleus", "tibialis"),
    "Chest": ("mid-lower-pectoralis", "upper-pectoralis"),
    "Forearms": ("wrist-extensors", "wrist-flexors"),
    "Glutes": ("gluteus-maximus", "gluteus-medius"),
    "Hamstrings": ("medial-hamstrings", "lateral-hamstrings"),
    "Lats": ("lats",),
    "Lower Back": ("lowerback",),
    "Neck": ("neck",),
    "Quadriceps": ("outer-quadricep", "rectus-femoris", "inner-quadricep"),
    "Shoulders": ("anterior-deltoid", "lateral-deltoid", "posterior-deltoid"),
    "Traps": ("upper-trapezius", "lower-trapezius", "traps-middle"),
    "Triceps": ("medial-head-triceps", "long-head-triceps", "lateral-head-triceps"),
    "Upper Back": ("lats", "upper-trapezius", "lower-trapezius", "traps-middle", "posterior-deltoid"),
    "Obliques": ("obliques",),
    # Anatomical names used by detailed datasets
    "pectoralis_major": ("mid-lower-pectoralis", "upper-pectoralis"),
    "deltoid_anterior": ("anterior-deltoid",),
    "deltoid_lateral": ("lateral-deltoid",),
    "deltoid_posterior": ("posterior-deltoid",),
    "biceps_brachii": ("long-head-bicep", "short-head-bicep"),
    "triceps_brachii": ("medial-head-triceps", "long-head-triceps", "lateral-head-triceps"),
    "brachialis": ("long-head-bicep", "short-head-bicep"),
    "brachioradialis": ("wrist-flexors",),
    "latissimus_dorsi": ("lats",),
    "trapezius": ("upper-trapezius", "lower-trapezius", "traps-middle"),
    "rhomboids": ("traps-middle",),
    "erector_spinae": ("lowerback",),
    "gluteus_maximus": ("gluteus-maximus",),
    "gluteus_medius": ("gluteus-medius",),
    "rectus_femoris": ("rectus-femoris",),
    "vastus_lateralis": ("outer-quadricep",),
    "vastus_medialis": ("inner-quadricep",),
    "biceps_femoris": ("lateral-hamstrings",),
    "gastrocnemius": ("gastrocnemius",),
    "soleus": ("soleus",),
    "rectus_abdominis": ("lower-abdominals", "upper-abdominals"),
    "external_oblique": ("obliques",),
    "internal_oblique": ("obliques",),
}

# Group -> detailed body-map ids (used as fallback and for full-body sets)
GROUP_TO_BODY_MAP_IDS: Final[dict[str, tuple[str, ...]]] = {
    "Chest": ("mid-lower-pectoralis", "upper-pectoralis"),
    "Back": ("lats", "lowerback", "upper-trapezius", "lower-trapezius", "traps-middle"),
    "Shoulders": ("anterior-deltoid", "lateral-deltoid", "posterior-deltoid"),
    "Arms": (
        "long-head-bicep",
        "short-head-bicep",
        "medial-head-triceps",
        "long-head-triceps",
        "lateral-head-triceps",
        "wrist-extensors",
        "wrist-flexors",
    ),
    "Legs": (
        "outer-quadricep",
        "rectus-femoris",
        "inner-quadricep",
        "medial-hamstrings",
        "lateral-hamstrings",
        "gluteus-maximus",
        "gluteus-medius",
        "gastrocnemius",
        "soleus",
        "tibialis",
        "inner-thigh",
    ),
    "Core": ("lower-abdominals", "upper-abdominals", "obliques"),
}

# =============================================================================
# LABELS
# =============================================================================

MONTH_ABBR: Final[tuple[str, ...]] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

LATEST_COMPOSITION_LABEL: Final[str] = "Last 7 days"
