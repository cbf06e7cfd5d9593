# archery_teams/models.py
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import (
    DEFAULT_PATIENCE,
    DEFAULT_REPORT_FILE,
    DEFAULT_ROSTER_FILES,
    COMPOUND,
    RECURVE,
    BAREBOW,
    LOG_LEVELS,
)


class Competitor(BaseModel):
    name: str
    score: int

    @field_validator("name")
    @classmethod
    def _name_nonempty(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("competitor name must not be empty")
        return v

    @field_validator("score")
    @classmethod
    def _score_positive(cls, v):
        if v <= 0:
            raise ValueError("competitor score must be a positive integer")
        return v


class Roster(BaseModel):
    """
    Competitors of one category: name -> qualification score.
    Frozen once built; generation walks the entries sorted by name.
    """
    model_config = ConfigDict(frozen=True)

    category: str
    entries: Dict[str, int] = Field(default_factory=dict)

    @field_validator("entries")
    @classmethod
    def _valid_entries(cls, v):
        for name, score in v.items():
            if not name or name != name.strip():
                raise ValueError(f"invalid competitor name: {name!r}")
            if score <= 0:
                raise ValueError(f"{name}: score must be a positive integer, got {score}")
        return v

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def items(self) -> List[Tuple[str, int]]:
        return sorted(self.entries.items())


class TeamSlot(BaseModel):
    team: int
    members: Dict[str, Optional[Competitor]] = Field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(m.score for m in self.members.values() if m is not None)

    def member(self, category: str) -> Optional[Competitor]:
        return self.members.get(category)


class AppConfig(BaseModel):
    compound_file: str = DEFAULT_ROSTER_FILES[COMPOUND]
    recurve_file: str = DEFAULT_ROSTER_FILES[RECURVE]
    barebow_file: str = DEFAULT_ROSTER_FILES[BAREBOW]
    output_file: str = DEFAULT_REPORT_FILE
    patience: int = DEFAULT_PATIENCE
    random_seed: Optional[int] = None   # None -> OS entropy, runs differ
    log_level: str = "INFO"
    progress_interval: int = 0          # trials between debug progress lines; 0 = off

    @field_validator("patience")
    @classmethod
    def _patience_positive(cls, v):
        if v <= 0:
            raise ValueError("patience must be a positive number of trials")
        return v

    @field_validator("progress_interval")
    @classmethod
    def _interval_nonnegative(cls, v):
        if v < 0:
            raise ValueError("progress_interval must be >= 0")
        return v

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v):
        v = str(v).upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}")
        return v

    def roster_files(self) -> Dict[str, str]:
        return {
            COMPOUND: self.compound_file,
            RECURVE: self.recurve_file,
            BAREBOW: self.barebow_file,
        }


class SearchResult(BaseModel):
    teams: List[TeamSlot]
    score: int
    trials: int = 0
    improvements: int = 0
