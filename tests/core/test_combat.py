"""전투 판정 테스트"""

from storyquest.core.character import Enemy, Player
from storyquest.core.combat import (
    BASE_ATTACK,
    TROPHY_NAME,
    WEAPON_ATTACK,
    ambush,
    player_attack_power,
    resolve_attack,
)
from storyquest.core.item import Item
from storyquest.core.room import Room


def _arena(enemy_hp: int = 15, enemy_atk: int = 4) -> tuple[Player, Enemy, Room]:
    room = Room("arena", "Arena", "Sand.")
    enemy = Enemy("Goblin Scout", max_health=enemy_hp, attack_power=enemy_atk)
    room.hostile = enemy
    player = Player(name="Adventurer", max_health=50, current_room=room)
    return player, enemy, room


class TestAttackPower:
    """Tests for player_attack_power."""

    def test_bare_hands(self) -> None:
        player, _, _ = _arena()
        assert player_attack_power(player) == BASE_ATTACK

    def test_with_sword(self) -> None:
        player, _, _ = _arena()
        player.add_item(Item("Sword", "Sharp."))
        assert player_attack_power(player) == WEAPON_ATTACK


class TestResolveAttack:
    """Tests for resolve_attack."""

    def test_enemy_survives_and_retaliates(self) -> None:
        player, enemy, room = _arena()
        outcome = resolve_attack(player, enemy, room)

        assert outcome.damage_dealt == 3
        assert enemy.health == 12
        assert player.health == 46
        assert not outcome.enemy_defeated
        assert not outcome.player_defeated
        assert outcome.messages == [
            "You attack Goblin Scout for 3 damage!",
            "Goblin Scout attacks Adventurer for 4 damage!",
        ]

    def test_exact_kill_drops_one_trophy_and_no_retaliation(self) -> None:
        """Test that a killing blow skips retaliation."""
        player, enemy, room = _arena(enemy_hp=10)
        player.add_item(Item("sword", "Sharp."))

        outcome = resolve_attack(player, enemy, room)

        assert enemy.health == 0
        assert not enemy.is_alive
        assert outcome.enemy_defeated
        assert player.health == 50
        assert room.item_names() == [TROPHY_NAME]
        assert room.items[0].description == "A remnant of Goblin Scout."
        assert not room.has_living_hostile
        # 죽은 적은 방에 남는다
        assert room.hostile is enemy

    def test_overkill_clamps_to_zero(self) -> None:
        player, enemy, room = _arena(enemy_hp=2)
        resolve_attack(player, enemy, room)
        assert enemy.health == 0

    def test_retaliation_can_slay_player(self) -> None:
        player, enemy, room = _arena(enemy_hp=100, enemy_atk=60)
        outcome = resolve_attack(player, enemy, room)

        assert player.health == 0
        assert outcome.player_defeated
        assert outcome.messages[-1] == "You were slain by the enemy's attack."


class TestAmbush:
    """Tests for ambush on room entry."""

    def test_living_enemy_attacks_once(self) -> None:
        player, enemy, _ = _arena()
        messages = ambush(enemy, player)
        assert player.health == 46
        assert messages == [
            "A hostile Goblin Scout notices you!",
            "Goblin Scout attacks Adventurer for 4 damage!",
        ]

    def test_dead_enemy_is_inert(self) -> None:
        player, enemy, _ = _arena()
        enemy.take_damage(enemy.max_health)
        assert ambush(enemy, player) == []
        assert player.health == 50
