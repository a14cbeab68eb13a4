# gradebook/core/curriculum_seed.py
# Digitized sample of the annual plans. Topic ids: {LEVEL}-{SUBJECT}-W{WEEK}
from gradebook.core.curriculum_progress import term_for_week
from gradebook.core.enums import ClassLevel


def _topic(topic_id, level, subject, week, topic, competency=None):
    return {
        "id": topic_id,
        "level": level,
        "subject": subject,
        "term": term_for_week(week),
        "week": week,
        "topic": topic,
        "competency": competency,
    }


CURRICULUM_SEED = [
    # AF3 islamic education
    _topic("AF3-ISL-W1", ClassLevel.AF3, "islamic_education", 1, "استقبال التلاميذ وتقويم تشخيصي"),
    _topic("AF3-ISL-W2", ClassLevel.AF3, "islamic_education", 2, "سورة الأعلى: قراءة، شرح وحفظ", "استظهار السور المقررة"),
    _topic("AF3-ISL-W3", ClassLevel.AF3, "islamic_education", 3, "حديث: المؤمن للمؤمن كالبنيان", "الحديث الشريف"),
    _topic("AF3-ISL-W4", ClassLevel.AF3, "islamic_education", 4, "سورة الغاشية: قراءة وحفظ", "القرآن الكريم"),
    _topic("AF3-ISL-W5", ClassLevel.AF3, "islamic_education", 5, "أركان الإيمان: الإيمان بالله", "العقيدة"),
    _topic("AF3-ISL-W7", ClassLevel.AF3, "islamic_education", 7, "سورة الفجر: قراءة وحفظ"),
    _topic("AF3-ISL-W14", ClassLevel.AF3, "islamic_education", 14, "سورة الشمس: قراءة وحفظ"),

    # AF3 mathematics
    _topic("AF3-MAT-W1", ClassLevel.AF3, "mathematics", 1, "تقويم تشخيصي للمكتسبات القبلية"),
    _topic("AF3-MAT-W2", ClassLevel.AF3, "mathematics", 2, "الأعداد من 0 إلى 199: قراءة وكتابة"),
    _topic("AF3-MAT-W3", ClassLevel.AF3, "mathematics", 3, "الأعداد من 0 إلى 299: مقارنة وترتيب"),
    _topic("AF3-MAT-W7", ClassLevel.AF3, "mathematics", 7, "الأعداد إلى 599: تمييز المراتب"),
    _topic("AF3-MAT-W14", ClassLevel.AF3, "mathematics", 14, "الجمع بالاحتفاظ والطرح بالاستلاف"),
    _topic("AF3-MAT-W27", ClassLevel.AF3, "mathematics", 27, "مفهوم الضرب: جداول الضرب 1-7"),

    # AF3 natural sciences
    _topic("AF3-SCI-W2", ClassLevel.AF3, "natural_sciences", 2, "تصنيف الأغذية: حبوب، خضروات، فواكه"),
    _topic("AF3-SCI-W5", ClassLevel.AF3, "natural_sciences", 5, "البقول والفواكه: مصادرها وفوائدها"),
    _topic("AF3-SCI-W19", ClassLevel.AF3, "natural_sciences", 19, "حالات المادة: الصلبة، السائلة، الغازية"),

    # AF4 history / geography
    _topic("AF4-HIS-W2", ClassLevel.AF4, "social_studies", 2, "الآثار التاريخية في الولاية"),
    _topic("AF4-HIS-W7", ClassLevel.AF4, "social_studies", 7, "المقارنة بين الماضي والحاضر (المعمار والزي)"),
    _topic("AF4-GEO-W3", ClassLevel.AF4, "social_studies", 3, "قراءة خريطة الولاية: المفتاح والرموز"),
    _topic("AF4-GEO-W8", ClassLevel.AF4, "social_studies", 8, "الرموز التمثيلية في الخريطة"),
]

# Placeholder weeks for the AF3 language tracks
CURRICULUM_SEED += [
    _topic(f"GEN-AR-{week}", ClassLevel.AF3, "arabic_language", week, f"درس اللغة العربية - الأسبوع {week}")
    for week in range(1, 31)
]
CURRICULUM_SEED += [
    _topic(f"GEN-FR-{week}", ClassLevel.AF3, "french_language", week, f"Leçon de Français - Semaine {week}")
    for week in range(1, 31)
]


def seed_levels() -> set:
    return {item["level"] for item in CURRICULUM_SEED}
