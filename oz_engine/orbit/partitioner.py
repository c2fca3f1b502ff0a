"""
Orbit Partitioner — fixed-capacity priority hierarchy over open projects.

Oldest project first:
  1 planet   the primary quest
  2 moons    secondary
  3 probes   tertiary
  rest       archived
"""

from typing import Iterable, List, Optional

from oz_engine.clock import to_naive_utc
from oz_engine.models.orbit import ProjectOrbitAssignment, ProjectRef
from oz_engine.models.work import ProjectRecord

MAX_PLANETS = 1
MAX_MOONS = 2
MAX_PROBES = 3


def open_project_refs(projects: Optional[Iterable[ProjectRecord]]) -> List[ProjectRef]:
    """Open projects from backend records, in their original order."""
    return [
        ProjectRef(id=p.id, created_at=p.created_at)
        for p in (projects or [])
        if not p.is_completed
    ]


def partition_orbits(open_projects: Optional[Iterable[ProjectRef]]) -> ProjectOrbitAssignment:
    """Assign orbits by creation time. Ties keep their original order."""
    ordered = sorted(open_projects or [], key=lambda p: to_naive_utc(p.created_at))
    ids = [p.id for p in ordered]

    moon_end = MAX_PLANETS + MAX_MOONS
    probe_end = moon_end + MAX_PROBES

    planet = ids[0] if ids else None
    moons = ids[MAX_PLANETS:moon_end]
    probes = ids[moon_end:probe_end]
    archived = ids[probe_end:]

    return ProjectOrbitAssignment(
        planet=planet,
        moons=moons,
        probes=probes,
        archived_count=len(archived),
        archived=archived,
        can_add_planet=planet is None,
        can_add_moon=len(moons) < MAX_MOONS,
        can_add_probe=len(probes) < MAX_PROBES,
    )
