"""Economy rules: which goods each economy type produces and demands"""
from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class EconomyProfile:
    """Production/demand profile of an economy type"""
    produces: Tuple[str, ...]
    demands: Tuple[str, ...]


ECONOMY_RULES: Dict[str, EconomyProfile] = {
    "agricultural": EconomyProfile(produces=("wheat", "wine"), demands=("tools", "cloth")),
    "mining": EconomyProfile(produces=("iron", "salt"), demands=("wheat", "tools", "fish")),
    "industrial": EconomyProfile(produces=("tools", "cloth"), demands=("iron", "wood", "spices")),
    "forestry": EconomyProfile(produces=("wood",), demands=("tools", "salt")),
    "port": EconomyProfile(produces=("fish", "spices"), demands=("wine", "wood")),
}


def profile_for(economy_type: str, rules: Dict[str, EconomyProfile] = ECONOMY_RULES) -> Optional[EconomyProfile]:
    """Profile of an economy type, None when the type is not recognized"""
    return rules.get(economy_type)
