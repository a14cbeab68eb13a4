# gradebook/core/levels.py
"""
Official scoring table: points per subject for every level, plus the
display names used on screens (Arabic) and on official reports (French).
"""
from typing import Dict, Mapping

from gradebook.core.enums import ClassLevel, Decision, PerformanceLevel

# Used when a level has no configuration at all
DEFAULT_LEVEL_MAX_SCORE = 200
# Used when a subject is missing from the level configuration
DEFAULT_SUBJECT_MAX_SCORE = 20

PASSING_AVERAGE = 10.0

SUBJECT_NAMES: Dict[str, str] = {
    "islamic_education": "التربية الإسلامية",
    "arabic_language": "اللغة العربية",
    "mathematics": "الرياضيات",
    "civic_education": "التربية المدنية",
    "art_education": "التربية الفنية",
    "physical_education": "التربية البدنية",
    "activities": "أنشطة",
    "social_studies": "الاجتماعيات (تاريخ/جغرافيا)",
    "natural_sciences": "العلوم الطبيعية",
    "french_language": "اللغة الفرنسية",
}

SUBJECT_NAMES_FR: Dict[str, str] = {
    "islamic_education": "Education Islamique",
    "arabic_language": "Langue arabe",
    "mathematics": "Mathématiques",
    "civic_education": "Education Civique",
    "art_education": "Education Technique",
    "physical_education": "Education Sportive",
    "activities": "Activités",
    "social_studies": "Histoire Géographie",
    "natural_sciences": "Sciences Naturelles",
    "french_language": "Français",
}

_UPPER_LEVELS = {
    "islamic_education": 30,
    "arabic_language": 50,
    "mathematics": 40,
    "civic_education": 10,
    "art_education": 10,
    "french_language": 30,
    "physical_education": 10,
    "social_studies": 10,
    "natural_sciences": 10,
}

LEVEL_CONFIG: Mapping[ClassLevel, Mapping[str, int]] = {
    ClassLevel.AF1: {
        "islamic_education": 40,
        "arabic_language": 80,
        "mathematics": 40,
        "civic_education": 15,
        "art_education": 15,
        "physical_education": 10,
    },
    ClassLevel.AF2: {
        "islamic_education": 30,
        "arabic_language": 50,
        "mathematics": 40,
        "civic_education": 15,
        "art_education": 15,
        "french_language": 40,
        "physical_education": 10,
    },
    ClassLevel.AF3: dict(_UPPER_LEVELS),
    ClassLevel.AF4: dict(_UPPER_LEVELS),
    ClassLevel.AF5: dict(_UPPER_LEVELS),
    ClassLevel.AF6: dict(_UPPER_LEVELS),
}

LEVEL_LABELS: Dict[PerformanceLevel, str] = {
    PerformanceLevel.EXCELLENT: "ممتاز",
    PerformanceLevel.GOOD: "جيد",
    PerformanceLevel.AVERAGE: "متوسط",
    PerformanceLevel.WEAK: "ضعيف",
}

DECISION_LABELS: Dict[Decision, str] = {
    Decision.PROMOTE: "ينتقل",
    Decision.REPEAT: "يعيد",
}


def get_level_subjects(level) -> Dict[str, int]:
    """Subject -> max score for a level; empty when the level is unknown."""
    try:
        level = ClassLevel(level)
    except ValueError:
        return {}
    return dict(LEVEL_CONFIG.get(level, {}))


def subject_display_name(subject_key: str, french: bool = False) -> str:
    names = SUBJECT_NAMES_FR if french else SUBJECT_NAMES
    return names.get(subject_key, subject_key)
