import dataclasses
from typing import Optional


@dataclasses.dataclass
class IngredientMatch:
    line: str
    matched_item: Optional[str]
    score: float  # 0, 0.8 or 1
