"""Project orbits — the planet/moon/probe hierarchy over open projects."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class ProjectOrbit(str, Enum):
    PLANET = "planet"
    MOON = "moon"
    PROBE = "probe"
    ARCHIVED = "archived"


class ProjectRef(BaseModel):
    """Minimal project identity needed to assign an orbit."""

    id: str
    created_at: datetime


class ProjectOrbitAssignment(BaseModel):
    """Partition of the open projects. Rebuilt from scratch on every call."""

    planet: Optional[str] = None
    moons: List[str] = Field(default_factory=list, max_length=2)
    probes: List[str] = Field(default_factory=list, max_length=3)
    archived_count: int = Field(ge=0, default=0)
    archived: List[str] = []
    can_add_planet: bool = True
    can_add_moon: bool = True
    can_add_probe: bool = True

    def orbit_of(self, project_id: str) -> Optional[ProjectOrbit]:
        """Which orbit a project sits in, or None if it was not partitioned."""
        if project_id == self.planet:
            return ProjectOrbit.PLANET
        if project_id in self.moons:
            return ProjectOrbit.MOON
        if project_id in self.probes:
            return ProjectOrbit.PROBE
        if project_id in self.archived:
            return ProjectOrbit.ARCHIVED
        return None

    @property
    def total(self) -> int:
        return (1 if self.planet is not None else 0) + len(self.moons) + len(self.probes) + self.archived_count
