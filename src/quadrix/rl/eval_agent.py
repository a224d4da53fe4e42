from __future__ import annotations

import argparse

import gymnasium as gym
import pygame

import quadrix.env  # ensure registration
from quadrix.visualization.renderer import Renderer


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser()
    p.add_argument("--model", type=str, required=True)
    p.add_argument("--steps", type=int, default=500)
    p.add_argument("--fps", type=int, default=10)
    p.add_argument("--seed", type=int, default=None)
    return p


def main() -> None:
    args = build_parser().parse_args()
    from stable_baselines3 import PPO

    env = gym.make("Quadrix-v0")
    model = PPO.load(args.model, device="auto")

    config = env.unwrapped.config
    renderer = Renderer(cell_size=28)
    pygame.init()
    try:
        screen = pygame.display.set_mode(renderer.window_size(config.height, config.width))
        pygame.display.set_caption("Quadrix - Agent")
        clock = pygame.time.Clock()

        obs, info = env.reset(seed=args.seed)
        total_reward = 0.0
        for _ in range(args.steps):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
            action, _ = model.predict(obs, deterministic=True)
            obs, reward, terminated, truncated, info = env.step(int(action))
            total_reward += float(reward)
            renderer.draw(screen, env.unwrapped.game)
            clock.tick(args.fps)
            if terminated or truncated:
                print(f"Episode finished: score={info['score']} level={info['level']}")
                obs, info = env.reset()
        print(f"Total reward: {total_reward:.2f}")
    finally:
        env.close()
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
