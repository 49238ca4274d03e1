import sys
import os
import time
import math
import argparse
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

# --- 路径设置 ---
# 确保能找到 src 包
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.types import Pose
from src.config import OpenSpaceConfig
from src.vehicles.config import AckermannConfig
from src.planning.reeds_shepp import ReedsSheppSolver, PathSampler
from src.visualization.observers import ExperimentObserver


def random_pose(rng: np.random.Generator, extent: float) -> Pose:
    x, y = rng.uniform(-extent, extent, size=2)
    return Pose(float(x), float(y), float(rng.uniform(-math.pi, math.pi)))


def run_experiment(num_trials: int = 500, extent: float = 20.0, seed: int = 42) -> pd.DataFrame:
    """随机起终点扫描，记录每次求解的曲线族、长度、耗时和采样校验结果"""
    vehicle_config = AckermannConfig(wheelbase=2.8, max_steer_deg=30.0)
    cfg = OpenSpaceConfig(step_size=0.5)
    radius = vehicle_config.min_turning_radius

    solver = ReedsSheppSolver()
    sampler = PathSampler()
    rng = np.random.default_rng(seed)

    rows = []
    for trial in range(num_trials):
        start = random_pose(rng, extent)
        end = random_pose(rng, extent)
        observer = ExperimentObserver()

        t0 = time.perf_counter()
        path = solver.shortest_path(start, end, radius, observer)
        t1 = time.perf_counter()

        if path is None:
            print(f"[WARN] trial {trial}: no feasible path {start} -> {end}")
            rows.append({'Trial': trial, 'Success': False})
            continue

        sampled = sampler.discretize(path, start, radius, cfg.step_size, end=end)
        spacing = sampled.spacings()

        rows.append({
            'Trial': trial,
            'Success': True,
            'Family': path.family,
            'Pattern': path.pattern,
            'Candidates': len(observer.candidates),
            'LengthM': path.physical_length(radius),
            'EuclideanM': start.distance_to(end),
            'TimeMs': (t1 - t0) * 1000,
            'Samples': len(sampled),
            'MaxSpacing': float(np.max(spacing)),
            'SpacingOk': bool(np.all(spacing <= cfg.step_size * math.sqrt(2.0))),
        })

    return pd.DataFrame(rows)


def plot_summary(df: pd.DataFrame, save_path: str = None):
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    ok = df[df['Success']]

    ok['Family'].value_counts().plot.bar(ax=axes[0], color='steelblue')
    axes[0].set_title('Selected Family')
    axes[0].set_ylabel('Count')

    axes[1].scatter(ok['EuclideanM'], ok['LengthM'], s=5, alpha=0.5)
    lim = max(ok['LengthM'].max(), ok['EuclideanM'].max())
    axes[1].plot([0, lim], [0, lim], 'k--', linewidth=1)
    axes[1].set_xlabel('Euclidean Distance (m)')
    axes[1].set_ylabel('Reeds-Shepp Length (m)')
    axes[1].set_title('Optimality')

    axes[2].hist(ok['TimeMs'], bins=40, color='orange')
    axes[2].set_xlabel('Solve Time (ms)')
    axes[2].set_title('Time Complexity')

    for ax in axes:
        ax.grid(True, linestyle=':', alpha=0.6)

    plt.tight_layout()
    if save_path:
        plt.savefig(save_path)
        plt.close(fig)
    else:
        plt.show()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Reeds-Shepp solver benchmark")
    parser.add_argument("--trials", type=int, default=500)
    parser.add_argument("--extent", type=float, default=20.0)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--out", type=str, default=os.path.join("logs", "experiments_reeds_shepp"))
    args = parser.parse_args()

    print("=== 开始 Reeds-Shepp 随机位姿扫描实验 ===")
    df_results = run_experiment(args.trials, args.extent, args.seed)

    print(f"{'Success%':<10} | {'Time(ms)':<10} | {'Len(m)':<10} | {'SpacingOk%':<10}")
    print("-" * 50)
    ok = df_results[df_results['Success']]
    print(f"{len(ok) / len(df_results) * 100:<10.1f} | {ok['TimeMs'].mean():<10.3f} | "
          f"{ok['LengthM'].mean():<10.2f} | {ok['SpacingOk'].mean() * 100:<10.1f}")

    os.makedirs(args.out, exist_ok=True)
    timestamp = time.strftime('%Y%m%d_%H%M%S')
    csv_path = os.path.join(args.out, f"reeds_shepp_{timestamp}.csv")
    df_results.to_csv(csv_path, index=False)
    print(f"结果已保存: {csv_path}")

    plot_summary(df_results, os.path.join(args.out, f"reeds_shepp_{timestamp}.png"))
