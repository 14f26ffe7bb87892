"""
Tag classifier.

Parses an exercise's free-text ``facet:value`` tags into a typed
``TagFacets`` record. Tag values may use the catalog's localized labels
or English identifiers; both map to the same canonical values.
"""

from typing import Dict, FrozenSet, Iterable, List, Optional, Set

from plan_engine.domain.models import Difficulty, Exercise, TagFacets

BODYWEIGHT = "bodyweight"

# Localized and alias labels -> canonical equipment id
EQUIPMENT_ALIASES: Dict[str, str] = {
    "徒手": BODYWEIGHT,
    "none": BODYWEIGHT,
    "body_weight": BODYWEIGHT,
    "body-weight": BODYWEIGHT,
    "啞鈴": "dumbbell",
    "dumbbells": "dumbbell",
    "彈力帶": "band",
    "bands": "band",
    "resistance_band": "band",
    "resistance_bands": "band",
    "壺鈴": "kettlebell",
    "kettlebells": "kettlebell",
}

DIFFICULTY_ALIASES: Dict[str, Difficulty] = {
    "初階": Difficulty.BEGINNER,
    "beginner": Difficulty.BEGINNER,
    "中階": Difficulty.INTERMEDIATE,
    "intermediate": Difficulty.INTERMEDIATE,
    "高階": Difficulty.ADVANCED,
    "advanced": Difficulty.ADVANCED,
}

# Facet defaults for exercises without a tag on that axis
DEFAULT_EQUIPMENT: FrozenSet[str] = frozenset({BODYWEIGHT})
DEFAULT_DIFFICULTY: FrozenSet[Difficulty] = frozenset({Difficulty.BEGINNER})

# Difficulty for exercises whose difficulty tags are all unknown labels
UNRECOGNIZED_DIFFICULTY: FrozenSet[Difficulty] = frozenset({Difficulty.ADVANCED})


def normalize_equipment(value: str) -> str:
    """Map an equipment label to its canonical id."""
    key = value.strip().lower()
    return EQUIPMENT_ALIASES.get(key, EQUIPMENT_ALIASES.get(value.strip(), key))


def parse_difficulty(value: str) -> Optional[Difficulty]:
    """Map a difficulty label to the enum, or None if unrecognized."""
    key = value.strip()
    return DIFFICULTY_ALIASES.get(key.lower(), DIFFICULTY_ALIASES.get(key))


def tag_values(tags: Iterable[str], facet: str) -> List[str]:
    """Return every value tagged under ``facet``, in tag order."""
    prefix = f"{facet}:"
    values = []
    for tag in tags:
        if tag.startswith(prefix):
            value = tag[len(prefix):].strip()
            if value:
                values.append(value)
    return values


def classify(exercise: Exercise) -> TagFacets:
    """
    Classify an exercise's tags into equipment, difficulty, type and goal facets.

    Missing facets resolve to the most permissive value: no equipment tag
    means bodyweight, no difficulty tag means beginner. Difficulty tags that
    are present but all unrecognized rank as advanced.
    """
    equipment: Set[str] = {normalize_equipment(v) for v in tag_values(exercise.tags, "equipment")}

    difficulty_labels = tag_values(exercise.tags, "difficulty")
    difficulty: Set[Difficulty] = set()
    for value in difficulty_labels:
        level = parse_difficulty(value)
        if level is not None:
            difficulty.add(level)
    if difficulty_labels and not difficulty:
        difficulty = set(UNRECOGNIZED_DIFFICULTY)

    return TagFacets(
        equipment=frozenset(equipment) or DEFAULT_EQUIPMENT,
        difficulty=frozenset(difficulty) or DEFAULT_DIFFICULTY,
        types=frozenset(tag_values(exercise.tags, "type")),
        goals=frozenset(tag_values(exercise.tags, "goal")),
    )
