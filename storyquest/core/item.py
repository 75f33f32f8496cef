"""아이템 도메인 모델

효과는 오버라이드가 아니라 ItemEffect 값(태그 + 수치)으로 표현하고
Item.use()에서 kind 기준으로 분기한다.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from storyquest.core.logging import get_logger

if TYPE_CHECKING:
    from storyquest.core.character import Player

logger = get_logger(__name__)


class EffectKind(str, Enum):
    NONE = "none"
    HEAL = "heal"


@dataclass(frozen=True)
class ItemEffect:
    """사용 효과. HEAL이면 amount만큼 회복."""

    kind: EffectKind = EffectKind.NONE
    amount: int = 0

    @classmethod
    def heal(cls, amount: int) -> "ItemEffect":
        return cls(kind=EffectKind.HEAL, amount=amount)


NO_EFFECT = ItemEffect()


@dataclass(frozen=True)
class Item:
    """아이템. 불변. 이름(대소문자 무시)이 식별 키."""

    name: str
    description: str
    usable: bool = False
    effect: ItemEffect = field(default=NO_EFFECT)

    def matches(self, name: str) -> bool:
        return self.name.casefold() == name.strip().casefold()

    def use(self, player: "Player") -> list[str]:
        """효과 적용 후 서술 메시지 반환.

        usable 여부는 호출 측(명령 해석기)에서 먼저 확인한다.
        """
        if self.effect.kind is EffectKind.HEAL:
            player.heal(self.effect.amount)
            # 동일 이름 아이템 하나만 소모 (인스턴스가 아닌 이름 기준)
            player.remove_item(self.name)
            logger.debug("%s consumed %s (hp=%d)", player.name, self.name, player.health)
            return [
                f"You used {self.name} and recovered {self.effect.amount} health. "
                f"(Now: {player.health}/{player.max_health})"
            ]

        return [f"You try to use {self.name}, but nothing happens."]


def health_potion(name: str, description: str, heal_amount: int) -> Item:
    """회복 물약 생성"""
    return Item(
        name=name,
        description=description,
        usable=True,
        effect=ItemEffect.heal(heal_amount),
    )
