"""내장 시나리오 (하드코딩된 월드)

각 빌더는 매번 새 World를 만든다. 방은 출구 연결 전에 World에 등록해
출구 대소문자 정책이 처음부터 적용되도록 한다.
"""

from typing import Callable, Dict

from storyquest.core.character import NPC, Enemy, Player
from storyquest.core.item import Item, health_potion
from storyquest.core.logging import get_logger
from storyquest.core.room import Room
from storyquest.core.world import World

logger = get_logger(__name__)

DEFAULT_SCENARIO = "castle"


def build_castle(case_sensitive: bool = False) -> World:
    """성 시나리오: 적, NPC, 회복 물약이 있는 기본 월드"""
    courtyard = Room(
        "courtyard",
        "Castle Courtyard",
        "A cold stone courtyard with creeping fog. Torches flicker in the wind.",
    )
    hall = Room(
        "hall",
        "Great Hall",
        "A grand hall with long tables. A dusty banner hangs on the wall.",
    )
    armory = Room(
        "armory",
        "Old Armory",
        "Racks of rusted weapons and a locked chest in the corner.",
    )
    tower = Room(
        "tower",
        "Wizard's Tower",
        "A spiral staircase winds upward. Magical sigils glow on the walls.",
    )

    player = Player(name="Adventurer", max_health=50, current_room=courtyard)
    player.add_item(
        health_potion("starter potion", "A tiny potion to help you begin.", 10)
    )

    world = World(
        name="castle",
        player=player,
        case_sensitive_directions=case_sensitive,
        intro="Welcome to StoryQuest: A Text Adventure!",
    )
    for room in (courtyard, hall, armory, tower):
        world.add_room(room)

    world.connect(courtyard, "north", hall)
    world.connect(hall, "south", courtyard)
    world.connect(hall, "east", armory)
    world.connect(hall, "up", tower)
    world.connect(armory, "west", hall)
    world.connect(tower, "down", hall)

    courtyard.add_item(Item("coin", "A tarnished gold coin."))
    armory.add_item(Item("sword", "A short sword. It looks usable."))
    armory.add_item(
        health_potion("small potion", "A small red bottle. Restores 20 HP.", 20)
    )
    hall.add_item(Item("map", "A map of the castle. Helpful to not get lost."))
    tower.add_item(Item("spellbook", "A leather-bound book filled with arcane notes."))

    hall.resident = NPC("Old Butler", "Welcome traveler. Beware the tower at night.")

    courtyard.hostile = Enemy("Goblin Scout", max_health=15, attack_power=4)
    armory.hostile = Enemy("Armory Warden", max_health=30, attack_power=7)

    return world


def _holds_sword_in_cave(world: World) -> bool:
    player = world.player
    return (
        player.current_room is not None
        and player.current_room.id == "cave"
        and player.has_item("sword")
    )


def build_village(case_sensitive: bool = False) -> World:
    """마을 시나리오: 검을 들고 동굴에 들어가면 승리"""
    village = Room(
        "village",
        "Village",
        "You are in a small village. A path leads into a dark forest.",
    )
    forest = Room(
        "forest",
        "Forest",
        "Tall trees block the sunlight. You hear distant growling.",
    )
    cave = Room(
        "cave",
        "Cave",
        "A dark, damp cave. Something dangerous lurks inside!",
    )

    world = World(
        name="village",
        player=Player(name="Hero", max_health=50, current_room=village),
        case_sensitive_directions=case_sensitive,
        win_condition=_holds_sword_in_cave,
        intro="Story Quest started. Find the sword and enter the cave to win!",
    )
    for room in (village, forest, cave):
        world.add_room(room)

    world.connect(village, "north", forest)
    world.connect(forest, "south", village)
    world.connect(forest, "east", cave)
    world.connect(cave, "west", forest)

    forest.add_item(Item("sword", "A sharp blade, perfect for defending yourself."))

    return world


def build_test(case_sensitive: bool = False) -> World:
    """테스트 시나리오: 방 두 개와 열쇠 하나"""
    room1 = Room("room1", "Room 1", "A plain test room with bare walls.")
    room2 = Room("room2", "Room 2", "Another test room, just as boring.")

    world = World(
        name="test",
        player=Player(name="Tester", max_health=50, current_room=room1),
        case_sensitive_directions=case_sensitive,
        intro="Test Adventure started. Try moving between rooms and picking up the key.",
    )
    world.add_room(room1)
    world.add_room(room2)

    world.connect(room1, "east", room2)
    world.connect(room2, "west", room1)

    room1.add_item(Item("key", "A small shiny test key."))

    return world


SCENARIOS: Dict[str, Callable[[bool], World]] = {
    "castle": build_castle,
    "village": build_village,
    "test": build_test,
}


def build_world(name: str = DEFAULT_SCENARIO, case_sensitive: bool = False) -> World:
    """이름으로 시나리오 생성. 알 수 없는 이름이면 ValueError."""
    builder = SCENARIOS.get(name.strip().lower())
    if builder is None:
        raise ValueError(
            f"Unknown scenario: {name!r} (available: {', '.join(sorted(SCENARIOS))})"
        )
    world = builder(case_sensitive)
    logger.info("World built: %s (%d rooms)", world.name, len(world.rooms))
    return world
