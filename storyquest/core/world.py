"""World - 방 레지스트리와 플레이어

프로세스 전역 상태 없이 GameSession이 World 값을 소유하고
명령 핸들러에 참조로 넘긴다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from storyquest.core.character import Player
from storyquest.core.item import Item
from storyquest.core.logging import get_logger
from storyquest.core.room import Room, normalize_direction

logger = get_logger(__name__)

# 승리 조건: (world) -> 달성 여부
WinCondition = Callable[["World"], bool]


@dataclass
class World:
    """게임 월드 상태"""

    name: str
    player: Player
    rooms: dict[str, Room] = field(default_factory=dict)
    case_sensitive_directions: bool = False
    win_condition: Optional[WinCondition] = None
    intro: str = ""

    def add_room(self, room: Room) -> Room:
        """방 등록. 출구 대소문자 정책을 월드 기준으로 통일한다."""
        if room.id in self.rooms:
            logger.warning("Overwriting existing room: %s", room.id)
        room.case_sensitive_exits = self.case_sensitive_directions
        room.exits = {
            normalize_direction(direction, self.case_sensitive_directions): target_id
            for direction, target_id in room.exits.items()
        }
        self.rooms[room.id] = room
        return room

    def connect(self, source: Room, direction: str, target: Room) -> None:
        """단방향 연결"""
        source.add_exit(direction, target)

    def get_room(self, room_id: str) -> Optional[Room]:
        return self.rooms.get(room_id)

    @property
    def current_room(self) -> Room:
        if self.player.current_room is None:
            raise RuntimeError("Player has no current room")
        return self.player.current_room

    def get_exit(self, room: Room, direction: str) -> Optional[Room]:
        """출구 방향을 실제 Room으로 해석. 없으면 None."""
        room_id = room.get_exit(direction)
        if room_id is None:
            return None
        target = self.rooms.get(room_id)
        if target is None:
            logger.warning("Exit %r of %s points to unknown room %s", direction, room.id, room_id)
        return target

    def move_player(self, direction: str) -> Optional[Room]:
        """선언된 출구로만 이동. 실패 시 위치 변화 없음."""
        target = self.get_exit(self.current_room, direction)
        if target is not None:
            self.player.current_room = target
        return target

    def find_item_anywhere(self, item_name: str) -> Optional[Item]:
        """모든 방을 등록 순서대로 검색"""
        for room in self.rooms.values():
            item = room.find_item(item_name)
            if item is not None:
                return item
        return None

    def is_won(self) -> bool:
        return self.win_condition is not None and self.win_condition(self)
