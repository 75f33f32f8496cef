"""API request/response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class CommandRequest(BaseModel):
    """명령 한 줄 실행 요청"""

    command: str = Field(..., max_length=200, description="예: 'go north', 'take sword'")


class ResetRequest(BaseModel):
    """새 게임 시작 요청"""

    scenario: Optional[str] = Field(None, description="castle | village | test")


# === Response Schemas ===


class PlayerInfo(BaseModel):
    """플레이어 정보"""

    name: str
    health: int
    max_health: int
    room_id: str
    room_name: str
    inventory: list[str] = []


class CommandResponse(BaseModel):
    """명령 실행 응답"""

    success: bool
    action: str
    messages: list[str] = []
    running: bool
    player: PlayerInfo
    data: Optional[dict[str, Any]] = None


class GameStateResponse(BaseModel):
    """게임 상태 응답"""

    scenario: str
    running: bool
    turn: int
    player: PlayerInfo
    room: list[str] = []

