"""세이브 슬롯: 단일 JSON 파일 전체 덮어쓰기/읽기

저장 내용은 평탄한 스냅샷(이름, 체력, 현재 방 id, 인벤토리 이름 목록)뿐이다.
아이템 설명/효과는 저장하지 않으며, 로드 시 이름으로 다시 찾아낸다:
1. 월드의 방들에서 같은 이름의 아이템을 검색
2. 없으면 이름 패턴으로 추정 ("potion" 포함 → 회복 물약 등)
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from storyquest.core.character import clamp_health
from storyquest.core.item import Item, health_potion
from storyquest.core.logging import get_logger
from storyquest.core.world import World

logger = get_logger(__name__)

FALLBACK_POTION_HEAL = 20


class SaveError(Exception):
    """세이브/로드 실패 기본 예외"""


class SaveNotFoundError(SaveError):
    pass


class SaveCorruptedError(SaveError):
    pass


class SaveWriteError(SaveError):
    pass


class SaveData(BaseModel):
    """세이브 파일 스키마 (버전 없음)"""

    model_config = ConfigDict(populate_by_name=True)

    player_name: str = Field(..., alias="PlayerName")
    player_health: int = Field(..., alias="PlayerHealth")
    current_room_id: str = Field(..., alias="CurrentRoomId")
    inventory: list[str] = Field(default_factory=list, alias="Inventory")

    @classmethod
    def from_world(cls, world: World) -> "SaveData":
        player = world.player
        return cls(
            player_name=player.name,
            player_health=player.health,
            current_room_id=world.current_room.id,
            inventory=[item.name for item in player.inventory],
        )


def resolve_item(name: str, world: World) -> Item:
    """저장된 이름을 아이템으로 복원 (월드 검색 → 이름 패턴 추정)"""
    found = world.find_item_anywhere(name)
    if found is not None:
        return found

    lowered = name.lower()
    if "potion" in lowered:
        return health_potion(name, "Restores health.", FALLBACK_POTION_HEAL)
    if lowered == "sword":
        return Item("sword", "A short sword.")
    return Item(name, "Recovered item.")


class SaveSlot:
    """단일 세이브 슬롯"""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def save(self, world: World) -> SaveData:
        """현재 상태를 파일에 덮어쓴다. 실패 시 SaveWriteError."""
        data = SaveData.from_world(world)
        try:
            self.path.write_text(
                data.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
            )
        except OSError as e:
            logger.warning("Failed to write save file %s: %s", self.path, e)
            raise SaveWriteError(str(e)) from e

        logger.info("Game saved to %s", self.path)
        return data

    def load(self) -> SaveData:
        """파일 읽기 + 스키마 검증. 월드는 건드리지 않는다."""
        if not self.exists():
            raise SaveNotFoundError(f"No save file at {self.path}")

        try:
            raw = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to read save file %s: %s", self.path, e)
            raise SaveCorruptedError(str(e)) from e

        try:
            return SaveData.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Corrupted save file %s: %s", self.path, e)
            raise SaveCorruptedError(str(e)) from e

    def apply(self, world: World, data: SaveData) -> None:
        """로드된 스냅샷을 라이브 월드에 덮어쓴다."""
        player = world.player
        player.name = data.player_name
        player.health = clamp_health(data.player_health, player.max_health)

        room = world.get_room(data.current_room_id)
        if room is not None:
            player.current_room = room
        else:
            logger.warning("Saved room %s not found; keeping current room", data.current_room_id)

        player.inventory.clear()
        for name in data.inventory:
            player.add_item(resolve_item(name, world))

        logger.info(
            "Game loaded from %s (room=%s, items=%d)",
            self.path,
            world.current_room.id,
            len(player.inventory),
        )

    def restore(self, world: World) -> SaveData:
        """load + apply"""
        data = self.load()
        self.apply(world, data)
        return data
