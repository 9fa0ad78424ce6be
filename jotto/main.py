'''
Jotto API

Endpoints:
POST /games                      -> start a game
GET  /games/{id}                 -> read state & guessed words
POST /games/{id}/guess           -> submit a guess
GET  /games/{id}/guessed-words   -> guessed words table (HTML fragment)
GET  /games/{id}/board           -> congrats message + guessed words (HTML page)

Games live in an in-memory GameStore; restarting the process clears them.
'''

import logging
from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from . import config
from .words import fetch_secret_word
from .store import Game, GameStore, to_game_state
from .views import render_guessed_words, render_board

from .schemas import (
    NewGameResponse,
    GuessRequest,
    GuessResponse,
    GameState,
)

config.configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="Jotto API", version="1.0.0")

# Allow everything in dev so the docs and front-end work easily
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# One store per process; tests swap it out through dependency_overrides
_store = GameStore()

def get_store() -> GameStore:
    return _store

def _get_game_or_404(store: GameStore, game_id: str) -> Game:
    game = store.get(game_id)
    if not game:
        raise HTTPException(status_code=404, detail="Game not found")
    return game

# ---------------- Routes ----------------

@app.post("/games", response_model=NewGameResponse, summary="Start a new game")
def start_game(store: GameStore = Depends(get_store)) -> NewGameResponse:
    secret_word = fetch_secret_word()                # word server w/ built-in fallback
    try:
        game = store.create(secret_word)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))

    return NewGameResponse(
        game_id=game.id,
        success=game.success,
        word_length=len(game.secret_word),
    )

@app.get("/games/{game_id}", response_model=GameState, summary="Get current game state")
def get_game(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> GameState:
    return to_game_state(_get_game_or_404(store, game_id))

@app.post("/games/{game_id}/guess", response_model=GuessResponse, summary="Submit a guess")
def submit_guess(
    game_id: str,
    payload: GuessRequest,
    store: GameStore = Depends(get_store),
) -> GuessResponse:
    try:
        updated = store.guess(game_id, payload.guess)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    if not updated:
        raise HTTPException(status_code=404, detail="Game not found")

    feedback = updated.guessed_words[-1] if updated.guessed_words else None

    return GuessResponse(
        success=updated.success,
        feedback=feedback,
        guess_count=len(updated.guessed_words),
        secret_word=store.get_secret(game_id),
        note="Game won. No more guesses allowed." if updated.success else None,
    )

@app.get("/games/{game_id}/guessed-words", response_class=HTMLResponse, summary="Guessed words table")
def get_guessed_words(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> HTMLResponse:
    game = _get_game_or_404(store, game_id)
    return HTMLResponse(render_guessed_words(game.guessed_words))

@app.get("/games/{game_id}/board", response_class=HTMLResponse, summary="Game board page")
def get_board(
    game_id: str,
    store: GameStore = Depends(get_store),
) -> HTMLResponse:
    game = _get_game_or_404(store, game_id)
    return HTMLResponse(render_board(game.guessed_words, success=game.success))
