"""
Entities

Value types produced and consumed by the parsing and search services.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set


@dataclass(frozen=True)
class Ingredient:
    qty: float
    unit: str
    name: str

    def to_dict(self):
        return {'qty': self.qty, 'unit': self.unit, 'name': self.name}


@dataclass(frozen=True)
class EquipmentItem:
    qty: int
    name: str

    def to_dict(self):
        return {'qty': self.qty, 'name': self.name}


@dataclass(frozen=True)
class RecipeDraft:
    """Structured result of free-text parsing, prior to persistence."""
    title: str
    description: str = ''
    ingredients: List[Ingredient] = field(default_factory=list)
    instructions: str = ''
    nutrition: Dict[str, str] = field(default_factory=dict)
    equipment: List[EquipmentItem] = field(default_factory=list)
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    servings: Optional[int] = None
    course: str = ''
    cuisine: str = ''

    def to_dict(self):
        return {
            'title': self.title,
            'description': self.description,
            'ingredients': [i.to_dict() for i in self.ingredients],
            'instructions': self.instructions,
            'nutrition': dict(self.nutrition),
            'equipment': [e.to_dict() for e in self.equipment],
            'prep_time': self.prep_time,
            'cook_time': self.cook_time,
            'servings': self.servings,
            'course': self.course,
            'cuisine': self.cuisine,
        }


@dataclass(frozen=True)
class MatchResult:
    total_score: float
    all_matched: bool


@dataclass(frozen=True)
class SearchQuery:
    label_ids: Set[int]
    tokens: List[str]
