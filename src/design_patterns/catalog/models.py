"""Pattern metadata - what a pattern is for and which classes play which role."""
import re
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

_SLUG_PATTERN = re.compile(r"^[a-z]+(-[a-z]+)*$")


class PatternCategory(str, Enum):
    """GoF pattern families, in catalog order."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @property
    def order(self) -> int:
        return list(PatternCategory).index(self)


class Participant(BaseModel):
    """A named role in a pattern mapped to one class in the demo."""
    model_config = ConfigDict(frozen=True)

    role: str
    class_name: str
    description: str = ""


class PatternInfo(BaseModel):
    """Catalog entry for one design pattern."""
    model_config = ConfigDict(frozen=True)

    slug: str
    name: str
    category: PatternCategory
    intent: str
    participants: List[Participant] = Field(min_length=1)
    applicability: List[str] = Field(default_factory=list)

    @field_validator("slug")
    @classmethod
    def validate_slug(cls, v: str) -> str:
        """Slugs are lower-case kebab-case words."""
        if not _SLUG_PATTERN.match(v):
            raise ValueError(f"Pattern slug must be kebab-case, got '{v}'")
        return v

    def summary(self) -> Dict[str, Any]:
        """Short form used by list output."""
        return {
            "slug": self.slug,
            "name": self.name,
            "category": self.category.value,
            "intent": self.intent,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Full form used by show output."""
        return self.model_dump(mode="json")
