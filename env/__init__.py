import gymnasium

from .arcade_env import SnakeArcadeEnv

gymnasium.register(
    id="SnakeArcade-v0",
    entry_point="env.arcade_env:SnakeArcadeEnv",
    max_episode_steps=1000,
)
