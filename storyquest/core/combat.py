"""
StoryQuest Core - Combat
========================
무작위 요소 없는 최소 전투 판정

[규칙]
1. 플레이어 공격력: 인벤토리에 "sword"가 있으면 WEAPON_ATTACK, 없으면 BASE_ATTACK
2. 적이 살아남으면 즉시 반격 (적의 고정 공격력)
3. 적 체력이 0이 되면 더 이상 교전 불가, 방에 전리품 1개 생성
4. 살아있는 적이 있는 방에 들어가면 무조건 기습 1회
"""

from dataclasses import dataclass, field
from typing import List

from storyquest.core.character import Enemy, Player
from storyquest.core.item import Item
from storyquest.core.logging import get_logger
from storyquest.core.room import Room

logger = get_logger(__name__)

WEAPON_NAME = "sword"
WEAPON_ATTACK = 10
BASE_ATTACK = 3
TROPHY_NAME = "trophy"


@dataclass
class CombatOutcome:
    """전투 결과"""

    damage_dealt: int
    enemy_defeated: bool
    player_defeated: bool
    messages: List[str] = field(default_factory=list)


def player_attack_power(player: Player) -> int:
    return WEAPON_ATTACK if player.has_item(WEAPON_NAME) else BASE_ATTACK


def make_trophy(enemy: Enemy) -> Item:
    return Item(TROPHY_NAME, f"A remnant of {enemy.name}.")


def resolve_attack(player: Player, enemy: Enemy, room: Room) -> CombatOutcome:
    """플레이어 공격 1회 + (생존 시) 적 반격 1회"""
    damage = player_attack_power(player)
    messages = [f"You attack {enemy.name} for {damage} damage!"]
    enemy.take_damage(damage)

    if not enemy.is_alive:
        messages.append(f"You defeated {enemy.name}!")
        room.add_item(make_trophy(enemy))
        logger.info("Enemy defeated: %s in %s", enemy.name, room.id)
        return CombatOutcome(
            damage_dealt=damage,
            enemy_defeated=True,
            player_defeated=False,
            messages=messages,
        )

    # 반격
    messages.append(enemy.attack(player))
    if not player.is_alive:
        messages.append("You were slain by the enemy's attack.")
        logger.info("Player slain by %s in %s", enemy.name, room.id)

    return CombatOutcome(
        damage_dealt=damage,
        enemy_defeated=False,
        player_defeated=not player.is_alive,
        messages=messages,
    )


def ambush(enemy: Enemy, player: Player) -> List[str]:
    """방 진입 시 기습. 회피 수단 없음."""
    if not enemy.is_alive:
        return []
    return [f"A hostile {enemy.name} notices you!", enemy.attack(player)]
