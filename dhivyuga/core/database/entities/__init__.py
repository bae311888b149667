"""
Database entity models.

Each module represents a single table or a family of closely related tables:

- categories: Mantra categories
- deities: Deities, including the nine grahas
- recitation: Recitation counts, times, kalams and time ranges
- mantras: The mantra catalog
- languages: Translation languages
- translations: Per-language mantra translations
- profiles: Accounts used for admin sign-in
"""

from .categories import Category
from .deities import Deity
from .languages import Language
from .mantras import Mantra
from .profiles import ROLE_ADMIN, ROLE_USER, Profile
from .recitation import Kalam, RecitationCount, RecitationTime, TimeRange
from .translations import MantraTranslation

__all__ = [
    "Category",
    "Deity",
    "Kalam",
    "Language",
    "Mantra",
    "MantraTranslation",
    "Profile",
    "ROLE_ADMIN",
    "ROLE_USER",
    "RecitationCount",
    "RecitationTime",
    "TimeRange",
]
