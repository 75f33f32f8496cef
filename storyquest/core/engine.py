"""
StoryQuest Core Engine - Game Session
=====================================
명령 해석기 + 턴 루프

GameSession이 World(방 그래프 + 플레이어)와 세이브 슬롯을 소유한다.
한 줄 입력을 동사/인자로 나누고 고정 디스패치 테이블로 핸들러를 호출한다.
모든 핸들러는 상태를 바꾸고 확인 메시지를 내거나,
상태를 그대로 두고 거부 사유를 낸다.

[상태 머신]
RUNNING → STOPPED (quit/exit, 플레이어 사망, 승리 조건 달성)
STOPPED는 종료 상태다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from storyquest.core.combat import ambush, resolve_attack
from storyquest.core.logging import get_logger
from storyquest.core.save import (
    SaveCorruptedError,
    SaveError,
    SaveNotFoundError,
    SaveSlot,
)
from storyquest.core.world import World

logger = get_logger(__name__)

HELP_LINES = [
    "Commands:",
    " - help : Show this help.",
    " - look : Examine the current room.",
    " - go <direction> : Move to another room (e.g., go north).",
    " - take <item> : Pick up an item (e.g., take sword).",
    " - drop <item> : Drop an item from your inventory.",
    " - inventory : Show your inventory.",
    " - use <item> : Use an item from your inventory (e.g., use small potion).",
    " - talk <name> : Talk to an NPC in the room.",
    " - attack <target> : Attack a hostile in the room.",
    " - save : Save your current game.",
    " - load : Load the saved game (if available).",
    " - quit/exit : Quit the game.",
]

DEFEAT_MESSAGE = "You have perished. Game over."
VICTORY_MESSAGE = "Congratulations! You completed the quest!"
FAREWELL_MESSAGE = "Thanks for playing StoryQuest."


class SessionState(str, Enum):
    RUNNING = "running"
    STOPPED = "stopped"


@dataclass
class ActionResult:
    """명령 처리 결과"""

    success: bool
    action_type: str
    messages: List[str] = field(default_factory=list)
    data: Optional[dict] = None

    @property
    def message(self) -> str:
        return "\n".join(self.messages)

    def to_dict(self) -> dict:
        result = {
            "success": self.success,
            "action": self.action_type,
            "messages": self.messages,
        }
        if self.data:
            result["data"] = self.data
        return result


def parse_command(line: str) -> tuple[str, str]:
    """입력을 (동사, 나머지 인자)로 분리. 인자는 더 쪼개지 않는다."""
    tokens = line.strip().split(None, 1)
    if not tokens:
        return "", ""
    verb = tokens[0].lower()
    arg = tokens[1].strip() if len(tokens) > 1 else ""
    return verb, arg


class GameSession:
    """단일 플레이어, 단일 스레드 게임 세션"""

    def __init__(self, world: World, save_slot: SaveSlot):
        self.world = world
        self.save_slot = save_slot
        self.state = SessionState.RUNNING
        self.turn = 0

        self._handlers: Dict[str, Callable[[str], ActionResult]] = {
            "help": self.show_help,
            "look": self.look,
            "go": self.go,
            "take": self.take,
            "drop": self.drop,
            "inventory": self.show_inventory,
            "use": self.use,
            "talk": self.talk,
            "attack": self.attack,
            "save": self.save,
            "load": self.load,
            "quit": self.quit,
            "exit": self.quit,
        }

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    # === 루프 ===

    def describe(self) -> List[str]:
        """현재 방 묘사 + 플레이어 상태 줄"""
        player = self.world.player
        return self.world.current_room.render() + [
            f"Player: {player.name} HP: {player.health}/{player.max_health}"
        ]

    def check_end(self) -> List[str]:
        """사망/승리 판정. 종료되면 해당 메시지 반환 (한 번만)."""
        if not self.running:
            return []
        if not self.world.player.is_alive:
            self._stop("defeat")
            return [DEFEAT_MESSAGE]
        if self.world.is_won():
            self._stop("victory")
            return [VICTORY_MESSAGE]
        return []

    def handle(self, line: str) -> ActionResult:
        """한 줄 명령 처리"""
        if not self.running:
            return ActionResult(False, "none", ["The game is over."])

        verb, arg = parse_command(line)
        if not verb:
            return ActionResult(False, "none")

        handler = self._handlers.get(verb)
        if handler is None:
            return ActionResult(
                False, "unknown", ["Unknown command. Type 'help' for commands."]
            )

        self.turn += 1
        logger.debug("Turn %d: %s %r", self.turn, verb, arg)
        result = handler(arg)
        result.messages.extend(self.check_end())
        return result

    def run(
        self,
        read_line: Callable[[], Optional[str]],
        write: Callable[[str], None],
    ) -> None:
        """REPL. read_line이 None을 반환하면(EOF) 종료."""
        if self.world.intro:
            write(self.world.intro)
        write("Type 'help' for a list of commands.")

        while self.running:
            write("")
            for line in self.describe():
                write(line)

            # 입력 받기 전 종료 판정
            ending = self.check_end()
            if ending:
                for line in ending:
                    write(line)
                break

            raw = read_line()
            if raw is None:
                self._stop("eof")
                break

            result = self.handle(raw)
            for line in result.messages:
                write(line)

        write(FAREWELL_MESSAGE)

    def _stop(self, reason: str) -> None:
        self.state = SessionState.STOPPED
        logger.info("Session stopped (%s) after %d turns", reason, self.turn)

    # === 명령 핸들러 ===

    def show_help(self, _: str = "") -> ActionResult:
        return ActionResult(True, "help", list(HELP_LINES))

    def look(self, _: str = "") -> ActionResult:
        return ActionResult(True, "look", self.world.current_room.render())

    def go(self, direction: str) -> ActionResult:
        if not direction:
            return ActionResult(False, "go", ["Go where? Specify a direction."])

        target = self.world.move_player(direction)
        if target is None:
            return ActionResult(False, "go", ["You can't go that way."])

        messages = [f"You move {direction} to {target.name}."]
        if target.has_living_hostile:
            messages.extend(ambush(target.hostile, self.world.player))

        return ActionResult(True, "go", messages, data={"room_id": target.id})

    def take(self, item_name: str) -> ActionResult:
        if not item_name:
            return ActionResult(False, "take", ["Take what?"])

        item = self.world.current_room.remove_item(item_name)
        if item is None:
            return ActionResult(False, "take", [f"No {item_name} here."])

        self.world.player.add_item(item)
        return ActionResult(True, "take", [f"You picked up: {item.name}"])

    def drop(self, item_name: str) -> ActionResult:
        if not item_name:
            return ActionResult(False, "drop", ["Drop what?"])

        item = self.world.player.remove_item(item_name)
        if item is None:
            return ActionResult(False, "drop", [f"You don't have a {item_name}."])

        self.world.current_room.add_item(item)
        return ActionResult(True, "drop", [f"You dropped the {item.name}."])

    def show_inventory(self, _: str = "") -> ActionResult:
        inventory = self.world.player.inventory
        if not inventory:
            return ActionResult(True, "inventory", ["Inventory: (empty)"])
        lines = ["Inventory:"]
        lines.extend(f" - {item.name}: {item.description}" for item in inventory)
        return ActionResult(True, "inventory", lines)

    def use(self, item_name: str) -> ActionResult:
        if not item_name:
            return ActionResult(False, "use", ["Use what?"])

        item = self.world.player.get_item(item_name)
        if item is None:
            return ActionResult(False, "use", ["You don't have that item."])
        if not item.usable:
            return ActionResult(False, "use", [f"The {item.name} can't be used."])

        return ActionResult(True, "use", item.use(self.world.player))

    def talk(self, name: str) -> ActionResult:
        if not name:
            return ActionResult(False, "talk", ["Talk to whom?"])

        resident = self.world.current_room.resident
        if resident is None or resident.name.casefold() != name.casefold():
            return ActionResult(
                False, "talk", [f"No one named {name} here to talk to."]
            )

        return ActionResult(True, "talk", [resident.talk()])

    def attack(self, target_name: str) -> ActionResult:
        if not target_name:
            return ActionResult(False, "attack", ["Attack what?"])

        room = self.world.current_room
        enemy = room.hostile
        if (
            enemy is None
            or not enemy.is_alive
            or enemy.name.casefold() != target_name.casefold()
        ):
            return ActionResult(
                False, "attack", [f"No hostile {target_name} to attack here."]
            )

        outcome = resolve_attack(self.world.player, enemy, room)
        return ActionResult(
            True,
            "attack",
            outcome.messages,
            data={
                "damage_dealt": outcome.damage_dealt,
                "enemy_defeated": outcome.enemy_defeated,
                "player_defeated": outcome.player_defeated,
            },
        )

    def save(self, _: str = "") -> ActionResult:
        try:
            self.save_slot.save(self.world)
        except SaveError as e:
            return ActionResult(False, "save", [f"Failed to save game: {e}"])
        return ActionResult(True, "save", [f"Game saved to {self.save_slot.path}."])

    def load(self, _: str = "") -> ActionResult:
        try:
            self.save_slot.restore(self.world)
        except SaveNotFoundError:
            return ActionResult(False, "load", ["No saved game found."])
        except SaveCorruptedError:
            return ActionResult(False, "load", ["Save file corrupted."])
        return ActionResult(True, "load", ["Game loaded."])

    def quit(self, _: str = "") -> ActionResult:
        self._stop("quit")
        return ActionResult(True, "quit", ["You leave the adventure behind."])
