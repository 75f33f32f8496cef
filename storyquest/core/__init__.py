"""StoryQuest Core Engine"""

from storyquest.core.character import HasHealth, Player, Enemy, NPC, clamp_health
from storyquest.core.item import Item, ItemEffect, EffectKind, health_potion
from storyquest.core.room import Room, normalize_direction
from storyquest.core.world import World
from storyquest.core.scenarios import SCENARIOS, build_world
from storyquest.core.combat import CombatOutcome, resolve_attack, ambush
from storyquest.core.save import (
    SaveData,
    SaveSlot,
    SaveError,
    SaveNotFoundError,
    SaveCorruptedError,
    SaveWriteError,
    resolve_item,
)
from storyquest.core.engine import GameSession, ActionResult, SessionState, parse_command

__all__ = [
    "HasHealth",
    "Player",
    "Enemy",
    "NPC",
    "clamp_health",
    "Item",
    "ItemEffect",
    "EffectKind",
    "health_potion",
    "Room",
    "normalize_direction",
    "World",
    "SCENARIOS",
    "build_world",
    "CombatOutcome",
    "resolve_attack",
    "ambush",
    "SaveData",
    "SaveSlot",
    "SaveError",
    "SaveNotFoundError",
    "SaveCorruptedError",
    "SaveWriteError",
    "resolve_item",
    "GameSession",
    "ActionResult",
    "SessionState",
    "parse_command",
]
