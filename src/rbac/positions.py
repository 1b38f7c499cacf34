# src/rbac/positions.py
from types import MappingProxyType
from typing import NamedTuple

from src.models.enums import Position


class PositionInfo(NamedTuple):
    """Seniority data attached to a position."""

    name: str
    level: int
    can_manage_team: bool


POSITION_INFO: MappingProxyType[Position, PositionInfo] = MappingProxyType(
    {
        Position.TEAM_LEAD: PositionInfo("팀장", 5, True),
        Position.DEPUTY_TEAM_LEAD: PositionInfo("부팀장", 4, True),
        Position.MANAGER: PositionInfo("매니저", 4, True),
        Position.RECEPTION_MANAGER: PositionInfo("리셉션 매니저", 4, True),
        Position.SECTION_CHIEF: PositionInfo("과장", 3, True),
        Position.SENIOR_TRAINER: PositionInfo("시니어 트레이너", 3, False),
        Position.PRO: PositionInfo("프로", 3, False),
        Position.GOLF_PRO: PositionInfo("골프 프로", 3, False),
        Position.TRAINER: PositionInfo("트레이너", 2, False),
        Position.PERSONAL_TRAINER: PositionInfo("퍼스널 트레이너", 2, False),
        Position.COACH: PositionInfo("코치", 2, False),
        Position.TENNIS_COACH: PositionInfo("테니스 코치", 2, False),
        Position.RECEPTION_STAFF: PositionInfo("리셉션 직원", 2, False),
        Position.STAFF: PositionInfo("사원", 2, False),
        Position.ASSISTANT_COACH: PositionInfo("어시스턴트 코치", 1, False),
        Position.ASSISTANT_PRO: PositionInfo("어시스턴트 프로", 1, False),
        Position.INTERN_TRAINER: PositionInfo("인턴 트레이너", 1, False),
        Position.INTERN: PositionInfo("인턴", 0, False),
    }
)

POSITION_LEVELS: MappingProxyType[Position, int] = MappingProxyType(
    {position: info.level for position, info in POSITION_INFO.items()}
)

# Reference names accepted by elevated access checks besides position labels
ELEVATED_ACCESS_ALIASES: MappingProxyType[str, Position] = MappingProxyType(
    {
        "team_lead": Position.TEAM_LEAD,
        "manager": Position.MANAGER,
    }
)


def resolve_position(value: Position | str | None) -> Position | None:
    """Turn a position label or alias into a Position, or None if unknown."""
    if value is None:
        return None
    if isinstance(value, Position):
        return value
    if value in ELEVATED_ACCESS_ALIASES:
        return ELEVATED_ACCESS_ALIASES[value]
    try:
        return Position(value)
    except ValueError:
        return None
