from __future__ import annotations

import argparse
import logging
from typing import Optional

import gymnasium as gym

import quadrix.env  # noqa: F401  registers Quadrix-v0


def run_random(steps: int = 2000, seed: Optional[int] = None) -> float:
    env = gym.make("Quadrix-v0")
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)
    total_reward = 0.0
    episodes = 1
    for _ in range(steps):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += float(reward)
        if terminated or truncated:
            obs, info = env.reset()
            episodes += 1
    env.close()
    print(f"Random agent total reward: {total_reward:.2f} over {episodes} episode(s)")
    return total_reward


def main() -> None:
    p = argparse.ArgumentParser()
    p.add_argument("--steps", type=int, default=2000)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--log-level", type=str, default="WARNING")
    args = p.parse_args()
    logging.basicConfig(level=args.log_level.upper())
    run_random(args.steps, args.seed)


if __name__ == "__main__":  # pragma: no cover
    main()
