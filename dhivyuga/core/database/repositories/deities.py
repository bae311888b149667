"""
Deity repository.

Besides plain CRUD this repository knows about the nine grahas: they are
ordinary deity rows recognised by name, and can be seeded in one call.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from sqlalchemy import func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from dhivyuga.core.logging_config import get_logger

from ..entities.deities import Deity
from ..entities.mantras import Mantra
from .base import SqlModelRepository

logger = get_logger(__name__)

GRAHA_NAME_KEYWORDS = (
    "graha",
    "sun",
    "moon",
    "mars",
    "mercury",
    "jupiter",
    "venus",
    "saturn",
    "rahu",
    "ketu",
)

GRAHAS: List[Dict[str, Any]] = [
    {
        "name": "Surya (Sun)",
        "sanskrit_name": "सूर्य",
        "description": "The Sun god, source of light and life. Represents the soul, vitality, and leadership qualities.",
        "day_of_week": "Sunday",
        "color": "Golden Red",
        "gemstone": "Ruby",
        "metal": "Gold",
        "element": "Fire",
        "direction": "East",
    },
    {
        "name": "Chandra (Moon)",
        "sanskrit_name": "चन्द्र",
        "description": "The Moon god, ruler of emotions and mind. Represents intuition, creativity, and maternal energy.",
        "day_of_week": "Monday",
        "color": "White",
        "gemstone": "Pearl",
        "metal": "Silver",
        "element": "Water",
        "direction": "Northwest",
    },
    {
        "name": "Mangal (Mars)",
        "sanskrit_name": "मंगल",
        "description": "The Mars god, planet of energy and action. Represents courage, strength, and determination.",
        "day_of_week": "Tuesday",
        "color": "Red",
        "gemstone": "Red Coral",
        "metal": "Copper",
        "element": "Fire",
        "direction": "South",
    },
    {
        "name": "Budh (Mercury)",
        "sanskrit_name": "बुध",
        "description": "The Mercury god, planet of communication and intellect. Represents wisdom, learning, and business.",
        "day_of_week": "Wednesday",
        "color": "Green",
        "gemstone": "Emerald",
        "metal": "Bronze",
        "element": "Earth",
        "direction": "North",
    },
    {
        "name": "Guru (Jupiter)",
        "sanskrit_name": "गुरु",
        "description": "The Jupiter god, planet of wisdom and spirituality. Represents knowledge, teaching, and prosperity.",
        "day_of_week": "Thursday",
        "color": "Yellow",
        "gemstone": "Yellow Sapphire",
        "metal": "Gold",
        "element": "Space",
        "direction": "Northeast",
    },
    {
        "name": "Shukra (Venus)",
        "sanskrit_name": "शुक्र",
        "description": "The Venus god, planet of love and beauty. Represents relationships, art, and material pleasures.",
        "day_of_week": "Friday",
        "color": "White",
        "gemstone": "Diamond",
        "metal": "Silver",
        "element": "Water",
        "direction": "Southeast",
    },
    {
        "name": "Shani (Saturn)",
        "sanskrit_name": "शनि",
        "description": "The Saturn god, planet of discipline and karma. Represents hard work, patience, and life lessons.",
        "day_of_week": "Saturday",
        "color": "Black",
        "gemstone": "Blue Sapphire",
        "metal": "Iron",
        "element": "Air",
        "direction": "West",
    },
    {
        "name": "Rahu (North Node)",
        "sanskrit_name": "राहु",
        "description": "The shadow planet representing desires and illusions. Brings sudden changes and material gains.",
        "day_of_week": "Saturday",
        "color": "Smoky",
        "gemstone": "Hessonite",
        "metal": "Lead",
        "element": "Air",
        "direction": "Southwest",
    },
    {
        "name": "Ketu (South Node)",
        "sanskrit_name": "केतु",
        "description": "The shadow planet representing spirituality and detachment. Brings wisdom and liberation.",
        "day_of_week": "Tuesday",
        "color": "Brown",
        "gemstone": "Cat's Eye",
        "metal": "Iron",
        "element": "Fire",
        "direction": "Northwest",
    },
]


class DeityRepository(SqlModelRepository[Deity]):
    """Repository for the deities table."""

    default_order = (Deity.name,)

    def __init__(self, session: AsyncSession):
        super().__init__(session, Deity)

    def _with_mantra_counts(self):
        counts = (
            select(Mantra.deity_id, func.count(Mantra.id).label("mantra_count")).group_by(Mantra.deity_id).subquery()
        )
        return (
            select(Deity, func.coalesce(counts.c.mantra_count, 0))
            .outerjoin(counts, counts.c.deity_id == Deity.id)
            .order_by(Deity.name)
        )

    async def list_with_mantra_counts(self, include_inactive: bool = False) -> List[Tuple[Deity, int]]:
        """List deities ordered by name with their mantra counts.

        Args:
            include_inactive: Also return deities hidden from the public listing

        Returns:
            (deity, mantra_count) pairs
        """
        stmt = self._with_mantra_counts()
        if not include_inactive:
            stmt = stmt.where(Deity.is_active == True)  # noqa: E712
        result = await self.session.execute(stmt)
        return [(deity, int(count)) for deity, count in result.all()]

    async def list_grahas(self) -> List[Tuple[Deity, int]]:
        """List the deities whose name identifies one of the nine grahas."""
        condition = or_(*(Deity.name.icontains(keyword) for keyword in GRAHA_NAME_KEYWORDS))
        result = await self.session.execute(self._with_mantra_counts().where(condition))
        return [(deity, int(count)) for deity, count in result.all()]

    async def seed_grahas(self) -> Tuple[bool, List[Deity]]:
        """Insert the nine graha deities unless graha rows already exist.

        Returns:
            ``(created, grahas)``: whether rows were inserted, and either the
            new rows or the graha rows already present
        """
        existing = [deity for deity, _ in await self.list_grahas()]
        if existing:
            logger.info(f"Skipping graha seed: {len(existing)} graha deities already present")
            return False, existing

        grahas = [Deity(**data) for data in GRAHAS]
        self.session.add_all(grahas)
        await self._commit()
        for graha in grahas:
            await self.session.refresh(graha)
        logger.info(f"Seeded {len(grahas)} graha deities")
        return True, grahas
