from .direction import Direction, is_reversal
from .snake import Snake, START_BODY
from .input_queue import InputQueue
from .speed import SpeedController, SpeedMode
from .collision import CollisionKind, classify, detect
from .apple import AppleSpawner
from .state import GameState, GamePhase, GameSnapshot, START_APPLE
from .config import GameConfig, load_config
