"""
env.py - Gymnasium environment driving the Connect Four board

The environment is an input source like any other: it plays columns on a
board owned by a ConnectFourGame session and reads the result back through
the board's accessors. Rewards are from Player ONE's point of view.
"""

from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from connectfour.debug import debug
from connectfour.game.session import ConnectFourGame
from connectfour.utils import ROWS, COLS, CONNECT_N, GameStatus, Player


class ConnectFourEnv(gym.Env):
    """
    Connect Four environment following the Gymnasium interface.

    Each step plays one column for whichever player is to move.
    """

    metadata = {'render_modes': ['ascii', 'human'], 'render_fps': 4}

    def __init__(self, render_mode: Optional[str] = None,
                 rows: int = ROWS, cols: int = COLS, connect_n: int = CONNECT_N):
        """
        Initialize the Connect Four environment.

        Args:
            render_mode: None, 'ascii' (render() returns text) or 'human'
                (render() prints)
            rows, cols, connect_n: Board configuration
        """
        if render_mode is not None and render_mode not in self.metadata['render_modes']:
            raise ValueError(f"Unsupported render mode: {render_mode}")

        debug.debug("Initializing ConnectFourEnv", "env")

        self.action_space = spaces.Discrete(cols)
        self.observation_space = spaces.Box(
            low=Player.EMPTY.value, high=Player.TWO.value, shape=(rows, cols), dtype=np.int8
        )

        self.game = ConnectFourGame(rows, cols, connect_n)
        self.render_mode = render_mode

        self.reward_win = 1.0
        self.reward_lose = -1.0
        self.reward_draw = 0.1
        self.reward_invalid_move = -0.5
        self.reward_step = -0.01

    @property
    def board(self):
        return self.game.board

    def reset(self, seed: Optional[int] = None,
              options: Optional[Dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        """Start a new game on a new board."""
        super().reset(seed=seed)
        debug.debug("Resetting environment", "env")

        self.game.new_game()

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), self._get_info()

    def step(self, action) -> Tuple[np.ndarray, float, bool, bool, Dict[str, Any]]:
        """
        Play a column for the player to move.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        debug.debug(f"Environment step with action {action}", "env")

        if not self.game.try_move(int(action)):
            debug.warning(f"Invalid action: {action}", "env")
            info = self._get_info()
            info['invalid_move'] = True
            return self._get_observation(), self.reward_invalid_move, False, True, info

        status = self.board.get_game_status()
        terminated = status.is_game_over()
        reward = self.reward_step

        if status == GameStatus.PLAYER_ONE_WINS:
            reward = self.reward_win
        elif status == GameStatus.PLAYER_TWO_WINS:
            reward = self.reward_lose
        elif status == GameStatus.DRAW:
            reward = self.reward_draw

        if terminated:
            debug.info(f"Game over: {status}", "env")

        if self.render_mode == "human":
            self.render()

        return self._get_observation(), reward, terminated, False, self._get_info()

    def render(self) -> Optional[str]:
        if self.render_mode == "ascii":
            return self.board.render()
        if self.render_mode == "human":
            print(self.board.render())
        return None

    def _get_observation(self) -> np.ndarray:
        return self.board.get_state()

    def _get_info(self) -> Dict[str, Any]:
        board = self.board
        valid_moves = board.get_valid_moves()
        return {
            'valid_moves': valid_moves,
            'num_valid_moves': len(valid_moves),
            'current_player': board.get_current_player().value,
            'game_status': board.get_game_status().name,
            'moves_made': board.get_moves_made(),
            'winning_line': board.get_winning_line(),
            'last_move': board.get_last_move(),
        }
