"""
Weight Configuration

Immutable three-category, nine-factor weight tree.

Within each category the factor weights sum to 1; the category weights
(academic/profile/fit contribution to the final score) also sum to 1.
Updates produce a new value, so a scorer's weights never change mid-ranking.
"""

import math
from dataclasses import dataclass, field, fields, replace
from typing import Dict, Mapping, Optional, Tuple, TypeVar

G = TypeVar("G", bound="_FactorGroup")

PartialWeights = Mapping[str, Mapping[str, float]]


@dataclass(frozen=True)
class _FactorGroup:
    """Named, finite, non-negative weights that renormalize to sum to 1."""
    
    @classmethod
    def factor_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))
    
    def values(self) -> Tuple[float, ...]:
        return tuple(getattr(self, name) for name in self.factor_names())
    
    def total(self) -> float:
        return sum(self.values())
    
    def as_dict(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in self.factor_names()}
    
    def merged(self: G, overrides: Optional[Mapping[str, float]]) -> G:
        """Return a copy with the given factors replaced (not renormalized)."""
        if not overrides:
            return self
        
        unknown = set(overrides) - set(self.factor_names())
        if unknown:
            raise ValueError(
                f"Unknown {type(self).__name__} factors: {', '.join(sorted(unknown))}"
            )
        for name, value in overrides.items():
            if not math.isfinite(value):
                raise ValueError(f"Weight '{name}' must be a finite number, got {value}")
            if value < 0:
                raise ValueError(f"Weight '{name}' must be non-negative, got {value}")
        
        return replace(self, **{k: float(v) for k, v in overrides.items()})
    
    def normalized(self: G) -> G:
        """Scale weights to sum to 1. All-zero groups are left untouched."""
        total = self.total()
        if total <= 0:
            return self
        return replace(self, **{name: value / total for name, value in self.as_dict().items()})


@dataclass(frozen=True)
class AcademicWeights(_FactorGroup):
    sat_score: float = 0.25
    cgpa: float = 0.20
    subject_grades: float = 0.15


@dataclass(frozen=True)
class ProfileWeights(_FactorGroup):
    extracurriculars: float = 0.10
    awards: float = 0.08
    standardized_tests: float = 0.07


@dataclass(frozen=True)
class FitWeights(_FactorGroup):
    major_alignment: float = 0.08
    location_match: float = 0.04
    budget_compatibility: float = 0.03


@dataclass(frozen=True)
class CategoryWeights(_FactorGroup):
    """How much each category contributes to the final score."""
    academic: float = 0.60
    profile: float = 0.25
    fit: float = 0.15
    
    @classmethod
    def from_overrides(
        cls,
        overrides: Optional[Mapping[str, float]] = None,
    ) -> "CategoryWeights":
        """Defaults merged with caller overrides, normalized to sum to 1."""
        return cls().merged(overrides).normalized()


CATEGORIES = ("academic", "profile", "fit")


@dataclass(frozen=True)
class WeightVector:
    """
    Nested factor weights for the academic, profile and fit categories.
    
    Build with `from_overrides` to get a normalized snapshot; the bare
    constructor keeps raw values.
    """
    academic: AcademicWeights = field(default_factory=AcademicWeights)
    profile: ProfileWeights = field(default_factory=ProfileWeights)
    fit: FitWeights = field(default_factory=FitWeights)
    
    @classmethod
    def from_overrides(cls, overrides: Optional[PartialWeights] = None) -> "WeightVector":
        """
        Defaults merged with a partial override tree, then normalized.
        
        Args:
            overrides: e.g. {"academic": {"sat_score": 0.5}}. Unspecified
                factors keep their default value before renormalization.
        """
        return cls()._merged(overrides).normalized()
    
    def with_updates(self, overrides: Optional[PartialWeights]) -> "WeightVector":
        """Merge overrides onto the current weights and renormalize."""
        return self._merged(overrides).normalized()
    
    def normalized(self) -> "WeightVector":
        return WeightVector(
            academic=self.academic.normalized(),
            profile=self.profile.normalized(),
            fit=self.fit.normalized(),
        )
    
    def as_dict(self) -> Dict[str, Dict[str, float]]:
        """Fresh nested dict of the weights; mutating it has no effect here."""
        return {
            "academic": self.academic.as_dict(),
            "profile": self.profile.as_dict(),
            "fit": self.fit.as_dict(),
        }
    
    def _merged(self, overrides: Optional[PartialWeights]) -> "WeightVector":
        if not overrides:
            return self
        
        unknown = set(overrides) - set(CATEGORIES)
        if unknown:
            raise ValueError(f"Unknown weight categories: {', '.join(sorted(unknown))}")
        
        return WeightVector(
            academic=self.academic.merged(overrides.get("academic")),
            profile=self.profile.merged(overrides.get("profile")),
            fit=self.fit.merged(overrides.get("fit")),
        )
