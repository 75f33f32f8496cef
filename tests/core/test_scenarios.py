"""내장 시나리오 테스트"""

import pytest

from storyquest.core.scenarios import SCENARIOS, build_world


class TestBuildWorld:
    """Tests for build_world and the built-in scenarios."""

    @pytest.mark.parametrize("name", sorted(SCENARIOS))
    def test_all_exits_point_to_registered_rooms(self, name: str) -> None:
        """Test that no scenario has a dangling exit."""
        world = build_world(name)
        for room in world.rooms.values():
            for target_id in room.exits.values():
                assert target_id in world.rooms

    def test_castle_layout(self) -> None:
        world = build_world("castle")
        assert set(world.rooms) == {"courtyard", "hall", "armory", "tower"}
        assert world.current_room.id == "courtyard"
        assert world.player.name == "Adventurer"
        assert world.player.max_health == 50
        assert [i.name for i in world.player.inventory] == ["starter potion"]
        assert world.rooms["hall"].resident.name == "Old Butler"
        assert world.rooms["courtyard"].hostile.attack_power == 4
        assert world.rooms["armory"].hostile.max_health == 30

    def test_village_win_condition(self) -> None:
        world = build_world("village")
        assert world.current_room.name == "Village"
        assert not world.is_won()

        world.player.current_room = world.rooms["cave"]
        assert not world.is_won()

        world.player.add_item(world.rooms["forest"].remove_item("sword"))
        assert world.is_won()

    def test_test_scenario(self) -> None:
        world = build_world("test")
        assert world.current_room.name == "Room 1"
        assert world.current_room.item_names() == ["key"]

    def test_name_is_case_insensitive(self) -> None:
        assert build_world("CASTLE").name == "castle"

    def test_unknown_scenario(self) -> None:
        with pytest.raises(ValueError, match="Unknown scenario"):
            build_world("moon base")

    def test_builds_are_independent(self) -> None:
        """Test that each build returns a fresh world."""
        first = build_world("castle")
        second = build_world("castle")
        first.rooms["courtyard"].remove_item("coin")
        assert second.rooms["courtyard"].item_names() == ["coin"]
