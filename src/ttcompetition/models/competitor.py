import uuid
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional

from munch import munchify


@dataclass(frozen=True)
class Competitor:
    display_name: str
    rating: float = 1000
    group_label: Optional[str] = None
    seed_rank: Optional[int] = None
    id: str = ""

    def __post_init__(self):
        if self.id == "":
            base = f"{self.display_name[:12]}_{str(uuid.uuid4())[:4]}"
            object.__setattr__(self, "id", base.lower().replace(" ", "_"))

    def __str__(self):
        return f"{self.display_name} (Rating: {self.rating})"

    def with_rating(self, rating: float) -> "Competitor":
        return replace(self, rating=rating)

    def with_seed(self, seed_rank: Optional[int], group_label: Optional[str] = None):
        if group_label is None:
            group_label = self.group_label
        return replace(self, seed_rank=seed_rank, group_label=group_label)

    def as_dict(self) -> Dict[str, Any]:
        data = {"id": self.id, "name": self.display_name, "rating": self.rating}
        if self.group_label is not None:
            data["groupLabel"] = self.group_label
        if self.seed_rank is not None:
            data["seedRank"] = self.seed_rank
        return data

    def munchify(self):
        return munchify(self.as_dict())

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Competitor":
        return cls(
            display_name=data["name"],
            rating=data.get("rating", 1000),
            group_label=data.get("groupLabel"),
            seed_rank=data.get("seedRank"),
            id=data.get("id", ""),
        )
