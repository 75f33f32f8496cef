"""Game API endpoints (single shared session)."""

from fastapi import APIRouter, Depends, HTTPException, Request

from storyquest.api.schemas import (
    CommandRequest,
    CommandResponse,
    GameStateResponse,
    PlayerInfo,
    ResetRequest,
)
from storyquest.config import settings
from storyquest.core.engine import GameSession
from storyquest.core.logging import get_logger
from storyquest.core.save import SaveSlot
from storyquest.core.scenarios import build_world

logger = get_logger(__name__)

router = APIRouter(prefix="/game", tags=["game"])


def get_session(request: Request) -> GameSession:
    """세션 인스턴스 반환 (의존성 주입)"""
    session = getattr(request.app.state, "session", None)
    if session is None:
        raise HTTPException(status_code=503, detail="Game session not initialized")
    return session


def new_session(scenario: str, save_file: str) -> GameSession:
    """시나리오로 새 세션 생성. 알 수 없는 시나리오면 ValueError."""
    world = build_world(scenario, case_sensitive=settings.CASE_SENSITIVE_DIRECTIONS)
    return GameSession(world, SaveSlot(save_file))


def _build_player_info(session: GameSession) -> PlayerInfo:
    """Player를 PlayerInfo로 변환"""
    player = session.world.player
    room = session.world.current_room
    return PlayerInfo(
        name=player.name,
        health=player.health,
        max_health=player.max_health,
        room_id=room.id,
        room_name=room.name,
        inventory=[item.name for item in player.inventory],
    )


def _build_state(session: GameSession) -> GameStateResponse:
    return GameStateResponse(
        scenario=session.world.name,
        running=session.running,
        turn=session.turn,
        player=_build_player_info(session),
        room=session.describe(),
    )


@router.get("/state", response_model=GameStateResponse)
def get_game_state(session: GameSession = Depends(get_session)) -> GameStateResponse:
    """현재 방 묘사와 플레이어 상태 조회"""
    return _build_state(session)


@router.post("/command", response_model=CommandResponse)
def run_command(
    request: CommandRequest,
    session: GameSession = Depends(get_session),
) -> CommandResponse:
    """
    명령 한 줄 실행

    콘솔과 같은 명령 테이블을 사용한다 (help, look, go, take, drop,
    inventory, use, talk, attack, save, load, quit/exit).
    """
    if not session.running:
        raise HTTPException(status_code=409, detail="The game is over. Reset to play again.")

    result = session.handle(request.command)
    logger.info("Command %r -> %s (success=%s)", request.command, result.action_type, result.success)

    return CommandResponse(
        **result.to_dict(),
        running=session.running,
        player=_build_player_info(session),
    )


@router.post("/reset", response_model=GameStateResponse)
def reset_game(request: ResetRequest, http_request: Request) -> GameStateResponse:
    """새 세션으로 교체. 세이브 파일 경로는 기존 세션을 따른다."""
    current = getattr(http_request.app.state, "session", None)
    save_file = str(current.save_slot.path) if current is not None else settings.SAVE_FILE
    scenario = request.scenario or settings.SCENARIO

    try:
        session = new_session(scenario, save_file)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    http_request.app.state.session = session
    logger.info("Session reset: %s", scenario)
    return _build_state(session)
