import json
import logging

from fastapi import FastAPI, Request, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import API_DESCRIPTION, API_TITLE, API_VERSION, CORS_ORIGINS
from .engine import ENGINE
from .errors import MoveRejected
from .models import ErrorResponse, GameState, MoveRequest

logger = logging.getLogger(__name__)

openapi_tags = [
    {"name": "game", "description": "Start, play, reset, and view the current game"},
    {"name": "ws", "description": "Websocket bridge to the game engine"},
]

app = FastAPI(
    title=API_TITLE,
    description=API_DESCRIPTION,
    version=API_VERSION,
    openapi_tags=openapi_tags
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

rejection_responses = {
    400: {"model": ErrorResponse, "description": "Invalid move index"},
    409: {"model": ErrorResponse, "description": "Cell occupied or game already over"},
}


@app.exception_handler(MoveRejected)
async def move_rejected_handler(request: Request, exc: MoveRejected):
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(detail=str(exc), error=exc.code).model_dump(),
    )


@app.get("/")
def health_check():
    """Health check endpoint."""
    return {"message": "Healthy"}

# ---------------- Game API ---------------- #

# PUBLIC_INTERFACE
@app.post("/game/new", response_model=GameState, tags=["game"], summary="Start a new game")
def new_game():
    """Discard the current game and start a fresh one with X to move."""
    return ENGINE.new_game()

# PUBLIC_INTERFACE
@app.post("/game/move", response_model=GameState, tags=["game"], summary="Make a move",
          responses=rejection_responses)
def make_a_move(req: MoveRequest):
    """Checks legality, applies the move for the current player, and returns the updated state."""
    return ENGINE.submit_move(req.index)

# PUBLIC_INTERFACE
@app.post("/game/reset", response_model=GameState, tags=["game"], summary="Reset the game")
def reset_game():
    return ENGINE.reset()

# PUBLIC_INTERFACE
@app.get("/game/state", response_model=GameState, tags=["game"], summary="Get current game state")
def get_game_state():
    """Returns the current state without changing it (initial load or refresh)."""
    return ENGINE.current_state()

# --------------- WebSocket bridge --------------- #


def dispatch(message) -> dict:
    """Run one websocket request against the engine and build the reply frame."""
    if not isinstance(message, dict):
        return {"error": "Invalid command", "code": "invalid_command"}
    action = message.get("action")
    try:
        if action == "new":
            state = ENGINE.new_game()
        elif action == "reset":
            state = ENGINE.reset()
        elif action == "state":
            state = ENGINE.current_state()
        elif action == "move":
            state = ENGINE.submit_move(message.get("index"))
        else:
            return {"error": "Invalid command", "code": "invalid_command"}
    except MoveRejected as err:
        return {"error": str(err), "code": err.code}
    return {"type": "game_state", "state": state.model_dump(mode="json", by_alias=True)}


# PUBLIC_INTERFACE
@app.websocket("/ws/game")
async def websocket_endpoint(websocket: WebSocket):
    """
    Request/response bridge to the engine.

    Every JSON message gets exactly one reply on the same socket; nothing is broadcast.
    See /ws/docs for the message format.
    """
    await websocket.accept()
    logger.info("Websocket client connected")
    try:
        while True:
            text = await websocket.receive_text()
            try:
                data = json.loads(text)
            except ValueError:
                data = None
            await websocket.send_json(dispatch(data))
    except WebSocketDisconnect:
        logger.info("Websocket client disconnected")

# PUBLIC_INTERFACE
@app.get("/ws/docs", tags=["ws"], summary="Websocket API usage help")
def websocket_usage():
    """
    API docs for websocket:
    - Endpoint: /ws/game
    - Protocol: JSON messages from client must have:
        - { "action": "move", "index": 4 }
        - { "action": "new" | "reset" | "state" }
    - Responses are { "type": "game_state", "state": {...GameState...}}
    - Errors { "error": "<string>", "code": "<code>" }
    """
    return {
        "endpoint": "/ws/game",
        "message": {
            "action": "move",
            "index": 4,
        },
        "actions": ["new", "reset", "state", "move"],
        "response": {
            "type": "game_state",
            "state": "GameState schema"
        },
        "error": {
            "error": "<string>",
            "code": "invalid_input | cell_occupied | game_over | invalid_command"
        }
    }
