"""
StoryQuest Core - Characters
============================
체력(Health)을 가진 존재들의 공통 능력과 구체 타입

Player와 Enemy는 상속 대신 HasHealth 프로토콜을 각각 구현합니다.
NPC는 체력이 없는 대화 전용 존재입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

from storyquest.core.logging import get_logger

# 순환 참조 방지
if TYPE_CHECKING:
    from storyquest.core.item import Item
    from storyquest.core.room import Room

logger = get_logger(__name__)


def clamp_health(value: int, max_health: int) -> int:
    """체력을 [0, max_health] 범위로 고정"""
    return max(0, min(value, max_health))


@runtime_checkable
class HasHealth(Protocol):
    """피해를 받고 회복할 수 있는 존재"""

    name: str
    max_health: int
    health: int

    def take_damage(self, amount: int) -> None: ...

    def heal(self, amount: int) -> None: ...

    @property
    def is_alive(self) -> bool: ...


@dataclass
class Enemy:
    """적대적 존재. 죽어도 방에서 제거되지 않는다."""

    name: str
    max_health: int
    attack_power: int
    health: int = -1  # -1 = max_health로 초기화

    def __post_init__(self):
        if self.health < 0:
            self.health = self.max_health
        self.health = clamp_health(self.health, self.max_health)

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> None:
        self.health = clamp_health(self.health - max(0, amount), self.max_health)

    def heal(self, amount: int) -> None:
        self.health = clamp_health(self.health + max(0, amount), self.max_health)

    def attack(self, target: HasHealth) -> str:
        """대상에게 고정 공격력만큼 피해. 서술 문장 반환."""
        target.take_damage(self.attack_power)
        logger.debug(
            "%s hit %s for %d (target hp=%d)",
            self.name,
            target.name,
            self.attack_power,
            target.health,
        )
        return f"{self.name} attacks {target.name} for {self.attack_power} damage!"


@dataclass
class NPC:
    """비적대 NPC - 고정 대사 한 줄"""

    name: str
    dialogue: str

    def talk(self) -> str:
        return f'{self.name} says: "{self.dialogue}"'


@dataclass
class Player:
    """플레이어 상태

    current_room은 World가 소유한 Room에 대한 참조일 뿐이다.
    """

    name: str
    max_health: int
    current_room: Optional["Room"] = None
    inventory: list["Item"] = field(default_factory=list)
    health: int = -1

    def __post_init__(self):
        if self.health < 0:
            self.health = self.max_health
        self.health = clamp_health(self.health, self.max_health)

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, amount: int) -> None:
        self.health = clamp_health(self.health - max(0, amount), self.max_health)

    def heal(self, amount: int) -> None:
        self.health = clamp_health(self.health + max(0, amount), self.max_health)

    # === 인벤토리 ===

    def add_item(self, item: "Item") -> None:
        self.inventory.append(item)

    def get_item(self, item_name: str) -> Optional["Item"]:
        """이름으로 아이템 조회 (대소문자 무시, 첫 번째 일치)"""
        for item in self.inventory:
            if item.matches(item_name):
                return item
        return None

    def remove_item(self, item_name: str) -> Optional["Item"]:
        """이름으로 아이템 하나 제거. 같은 이름이 여럿이면 첫 번째만."""
        for index, item in enumerate(self.inventory):
            if item.matches(item_name):
                return self.inventory.pop(index)
        return None

    def has_item(self, item_name: str) -> bool:
        return self.get_item(item_name) is not None

    def count_items(self, item_name: str) -> int:
        return sum(1 for item in self.inventory if item.matches(item_name))
