'''
Bulls & Cows API (single in-process session)

Endpoints:
POST /config               -> set length / difficulty / repeats for the next game
POST /game                 -> start a game
GET  /game                 -> read state & history
POST /game/guess           -> submit a guess
POST /game/hint            -> reveal one digit
POST /game/restart         -> new game, same config

State lives only in process memory; restarting the server forgets it.
'''

import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .errors import ConfigurationError, GuessValidationError, InactiveSession
from .session import GameSession

from .schemas import (
    ConfigRequest,
    ConfigOut,
    GameStateOut,
    GuessRequest,
    GuessResponse,
    HintOut,
    ResultOut,
)

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(title="Bulls & Cows API", version="1.0.0")

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

app.state.session = GameSession()

# Routes share the one session held on app.state (tests swap it out)
def get_session(request: Request) -> GameSession:
    return request.app.state.session

# ---------------- Routes ----------------

@app.post("/config", response_model=ConfigOut, summary="Configure the next game")
def set_config(
    payload: ConfigRequest,
    session: GameSession = Depends(get_session),
) -> ConfigOut:
    try:
        game_config = session.configure(payload.length, payload.difficulty, payload.allow_repeats)
    except ConfigurationError as ce:
        raise HTTPException(status_code=400, detail=str(ce))
    return ConfigOut(
        length=game_config.length,
        difficulty=game_config.difficulty,
        allow_repeats=game_config.allow_repeats,
        max_attempts=game_config.max_attempts,
    )

@app.post("/game", response_model=GameStateOut, summary="Start a new game")
def start_game(session: GameSession = Depends(get_session)) -> GameStateOut:
    return GameStateOut.from_state(session.init_game())

@app.get("/game", response_model=GameStateOut, summary="Get current game state")
def get_game(session: GameSession = Depends(get_session)) -> GameStateOut:
    return GameStateOut.from_state(session.get_state())

@app.post("/game/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    payload: GuessRequest,
    session: GameSession = Depends(get_session),
) -> GuessResponse:
    try:
        score = session.submit_guess(payload.guess)
    except GuessValidationError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    except InactiveSession as ie:
        raise HTTPException(status_code=409, detail=str(ie))

    # When the game ends, include the summary (and the secret) in the response
    result = session.result()
    return GuessResponse(
        bulls=score.bulls,
        cows=score.cows,
        attempts_remaining=session.attempts_remaining,
        status=session.status,
        result=ResultOut.from_result(result) if result else None,
    )

@app.post("/game/hint", response_model=HintOut, summary="Reveal one digit/position")
def get_hint(session: GameSession = Depends(get_session)) -> HintOut:
    hint = session.use_hint()
    state = session.get_state()
    note = None
    if hint is None:
        note = "No active game." if not state.active else "No hints left."
    return HintOut.from_hint(hint, hints_left=state.hints_left, note=note)

@app.post("/game/restart", response_model=GameStateOut, summary="Restart with the same config")
def restart_game(session: GameSession = Depends(get_session)) -> GameStateOut:
    return GameStateOut.from_state(session.restart())
