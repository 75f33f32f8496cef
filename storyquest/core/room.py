"""
StoryQuest Core - Room Graph
============================
방향 문자열로 연결된 방(Room) 노드

출구는 단방향이다. 양방향 통로는 양쪽에서 각각 선언해야 한다.
출구 값은 방 객체가 아닌 방 id로 저장하며, World가 id를 방으로 해석한다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from storyquest.core.character import NPC, Enemy
from storyquest.core.item import Item
from storyquest.core.logging import get_logger

logger = get_logger(__name__)


def normalize_direction(direction: str, case_sensitive: bool = False) -> str:
    """방향 키 정규화. 공백 제거 후 기본적으로 소문자화."""
    direction = direction.strip()
    if case_sensitive:
        return direction
    return direction.lower()


@dataclass
class Room:
    """방 노드

    exits: 방향 → 방 id (선언 순서 유지)
    """

    id: str
    name: str
    description: str
    exits: dict[str, str] = field(default_factory=dict)
    items: list[Item] = field(default_factory=list)
    resident: Optional[NPC] = None
    hostile: Optional[Enemy] = None
    case_sensitive_exits: bool = False

    # === 그래프 ===

    def add_exit(self, direction: str, room: "Room") -> None:
        """단방향 출구 등록. 같은 방향이면 덮어쓴다."""
        key = normalize_direction(direction, self.case_sensitive_exits)
        if not key:
            raise ValueError("Exit direction must not be empty")
        self.exits[key] = room.id

    def get_exit(self, direction: str) -> Optional[str]:
        """방향에 연결된 방 id. 없으면 None."""
        key = normalize_direction(direction, self.case_sensitive_exits)
        return self.exits.get(key)

    # === 아이템 ===

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def find_item(self, item_name: str) -> Optional[Item]:
        for item in self.items:
            if item.matches(item_name):
                return item
        return None

    def remove_item(self, item_name: str) -> Optional[Item]:
        """이름으로 첫 번째 일치 아이템을 꺼낸다."""
        for index, item in enumerate(self.items):
            if item.matches(item_name):
                return self.items.pop(index)
        return None

    def item_names(self) -> list[str]:
        return [item.name for item in self.items]

    # === 상태 ===

    @property
    def has_living_hostile(self) -> bool:
        return self.hostile is not None and self.hostile.is_alive

    def render(self) -> list[str]:
        """방 묘사 (결정적 순서: 설명 → 아이템 → NPC → 적 → 출구)"""
        lines = [f"== {self.name} ==", self.description]

        if self.items:
            lines.append("You see:")
            lines.extend(f" - {item.name}: {item.description}" for item in self.items)

        if self.resident is not None:
            lines.append(f"Here: {self.resident.name}")

        if self.has_living_hostile:
            lines.append(f"Danger: {self.hostile.name} (Hostile)")

        if self.exits:
            lines.append("Exits:")
            lines.extend(f" - {direction}" for direction in self.exits)

        return lines
