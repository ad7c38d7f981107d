from __future__ import annotations

import threading
import time
import uuid
from typing import Any

from fastapi import APIRouter, HTTPException, status

from MASANIELLO.server.common.utils.logger import logger
from MASANIELLO.server.configurations import server_settings
from MASANIELLO.server.entities.configuration import ServerSettings
from MASANIELLO.server.schemas.staking import (
    StakingDefaultsResponse,
    StakingSessionResponse,
    StakingShutdownResponse,
    StakingSnapshotResponse,
    StakingStartRequest,
    TradeOutcomeRequest,
    TradeOutcomeResponse,
)
from MASANIELLO.server.staking.engine import StakingEngine
from MASANIELLO.server.staking.errors import StrategyConfigurationError
from MASANIELLO.server.staking.types import OUTCOME_WIN


router = APIRouter(prefix="/staking", tags=["staking"])


###############################################################################
class StakingSession:
    def __init__(self, session_id: str, engine: StakingEngine) -> None:
        self.session_id = session_id
        self.engine = engine
        self.last_seen = time.time()
        self.lock = threading.Lock()

    # -----------------------------------------------------------------------------
    def touch(self) -> None:
        self.last_seen = time.time()

    # -----------------------------------------------------------------------------
    def snapshot(self) -> dict[str, Any]:
        with self.lock:
            self.touch()
            return self.engine.snapshot()

    # -----------------------------------------------------------------------------
    def record(self, is_win: bool) -> tuple[bool, dict[str, Any]]:
        with self.lock:
            self.touch()
            trades_before = self.engine.state.trades_taken
            self.engine.apply_outcome(is_win)
            applied = self.engine.state.trades_taken > trades_before
            return applied, self.engine.snapshot()

    # -----------------------------------------------------------------------------
    def reset(self) -> dict[str, Any]:
        with self.lock:
            self.touch()
            self.engine = self.engine.restart()
            return self.engine.snapshot()


###############################################################################
class StakingState:
    def __init__(self, max_sessions: int = 16) -> None:
        self.sessions: dict[str, StakingSession] = {}
        self.max_sessions = max_sessions

    # -----------------------------------------------------------------------------
    def create_session(self, session: StakingSession) -> None:
        self.sessions[session.session_id] = session
        self.cleanup()

    # -----------------------------------------------------------------------------
    def get_session(self, session_id: str) -> StakingSession:
        session = self.sessions.get(session_id)
        if session is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Session not found.",
            )
        return session

    # -----------------------------------------------------------------------------
    def delete_session(self, session_id: str) -> None:
        if session_id in self.sessions:
            del self.sessions[session_id]

    # -----------------------------------------------------------------------------
    def cleanup(self) -> None:
        if len(self.sessions) <= self.max_sessions:
            return
        ordered = sorted(self.sessions.values(), key=lambda item: item.last_seen)
        for stale in ordered[: max(0, len(ordered) - self.max_sessions)]:
            del self.sessions[stale.session_id]


staking_state = StakingState(max_sessions=server_settings.sessions.max_sessions)


###############################################################################
class StakingEndpoint:
    def __init__(self, router: APIRouter, settings: ServerSettings) -> None:
        self.router = router
        self.settings = settings

    # -----------------------------------------------------------------------------
    def build_snapshot(self, snapshot: dict[str, Any]) -> StakingSnapshotResponse:
        return StakingSnapshotResponse(**snapshot)

    # -----------------------------------------------------------------------------
    def get_defaults(self) -> StakingDefaultsResponse:
        defaults = self.settings.staking
        return StakingDefaultsResponse(
            capital=defaults.default_capital,
            payout_percent=defaults.default_payout_percent,
            total_trades=defaults.default_total_trades,
            target_wins=defaults.default_target_wins,
            probability_method=defaults.probability_method,
        )

    # -----------------------------------------------------------------------------
    def start_session(self, payload: StakingStartRequest) -> StakingSessionResponse:
        defaults = self.settings.staking
        try:
            engine = StakingEngine.configure(
                payload.capital if payload.capital is not None else defaults.default_capital,
                (
                    payload.payout_percent
                    if payload.payout_percent is not None
                    else defaults.default_payout_percent
                ),
                (
                    payload.total_trades
                    if payload.total_trades is not None
                    else defaults.default_total_trades
                ),
                (
                    payload.target_wins
                    if payload.target_wins is not None
                    else defaults.default_target_wins
                ),
                probability_method=defaults.probability_method,
            )
        except StrategyConfigurationError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=exc.to_payload(),
            ) from exc
        except Exception as exc:
            logger.exception("Failed to configure staking session")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Unable to start staking session.",
            ) from exc

        session = StakingSession(uuid.uuid4().hex, engine)
        staking_state.create_session(session)
        logger.info("Started staking session %s", session.session_id)

        return StakingSessionResponse(
            session_id=session.session_id,
            snapshot=self.build_snapshot(session.snapshot()),
        )

    # -----------------------------------------------------------------------------
    def get_session(self, session_id: str) -> StakingSessionResponse:
        session = staking_state.get_session(session_id)
        return StakingSessionResponse(
            session_id=session_id,
            snapshot=self.build_snapshot(session.snapshot()),
        )

    # -----------------------------------------------------------------------------
    def submit_trade(
        self, session_id: str, payload: TradeOutcomeRequest
    ) -> TradeOutcomeResponse:
        session = staking_state.get_session(session_id)
        try:
            applied, snapshot = session.record(payload.outcome == OUTCOME_WIN)
        except Exception as exc:
            logger.exception("Failed to apply trade outcome")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Unable to apply trade outcome.",
            ) from exc

        return TradeOutcomeResponse(
            session_id=session_id,
            applied=applied,
            status=snapshot["status"],
            snapshot=self.build_snapshot(snapshot),
        )

    # -----------------------------------------------------------------------------
    def reset_session(self, session_id: str) -> StakingSessionResponse:
        session = staking_state.get_session(session_id)
        try:
            snapshot = session.reset()
        except Exception as exc:
            logger.exception("Failed to reset staking session")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Unable to reset staking session.",
            ) from exc

        return StakingSessionResponse(
            session_id=session_id,
            snapshot=self.build_snapshot(snapshot),
        )

    # -----------------------------------------------------------------------------
    def shutdown(self, session_id: str) -> StakingShutdownResponse:
        staking_state.delete_session(session_id)
        return StakingShutdownResponse(session_id=session_id, status="closed")

    # -----------------------------------------------------------------------------
    def add_routes(self) -> None:
        self.router.add_api_route(
            "/defaults",
            self.get_defaults,
            methods=["GET"],
            status_code=status.HTTP_200_OK,
        )
        self.router.add_api_route(
            "/sessions/start",
            self.start_session,
            methods=["POST"],
            status_code=status.HTTP_200_OK,
        )
        self.router.add_api_route(
            "/sessions/{session_id}",
            self.get_session,
            methods=["GET"],
            status_code=status.HTTP_200_OK,
        )
        self.router.add_api_route(
            "/sessions/{session_id}/trade",
            self.submit_trade,
            methods=["POST"],
            status_code=status.HTTP_200_OK,
        )
        self.router.add_api_route(
            "/sessions/{session_id}/reset",
            self.reset_session,
            methods=["POST"],
            status_code=status.HTTP_200_OK,
        )
        self.router.add_api_route(
            "/sessions/{session_id}/shutdown",
            self.shutdown,
            methods=["POST"],
            status_code=status.HTTP_200_OK,
        )


staking_endpoint = StakingEndpoint(router=router, settings=server_settings)
staking_endpoint.add_routes()
