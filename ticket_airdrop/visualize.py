"""
Airdrop visualization: leaderboard shares, draw spread and sample clouds
"""

from pathlib import Path
from typing import List, Sequence, Union

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from .geometry import EDGE, Point3
from .models import LeaderboardEntry

COLORS = {
    'primary': '#00D4AA',
    'secondary': '#FF6B6B',
    'accent': '#4ECDC4',
    'dark': '#1a1a2e',
    'light': '#eaeaea'
}

PathLike = Union[str, Path]

MAX_POINT = Point3(EDGE, EDGE, EDGE).value


def _style():
    plt.style.use('dark_background')
    plt.rcParams['figure.facecolor'] = COLORS['dark']
    plt.rcParams['axes.facecolor'] = '#16213e'
    plt.rcParams['axes.edgecolor'] = COLORS['light']
    plt.rcParams['text.color'] = COLORS['light']
    plt.rcParams['font.size'] = 12


def _save(fig, path: PathLike) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return path


def plot_leaderboard(leaderboard: Sequence[LeaderboardEntry], path: PathLike, top: int = 20) -> Path:
    """Bar chart: share of the lottery range held by the top holders"""
    _style()
    fig, ax = plt.subplots(figsize=(12, 6))

    shown = list(leaderboard[:top])
    names = [e.name if e.name != '???' else e.id for e in shown]
    percents = np.array([float(e.percent) for e in shown])

    bars = ax.bar(names, percents, color=COLORS['primary'], edgecolor='white', linewidth=1)
    for bar, val in zip(bars, percents):
        ax.text(bar.get_x() + bar.get_width() / 2., bar.get_height(),
                f'{val:.2f}%', ha='center', va='bottom', fontsize=9)

    ax.set_ylabel('Share of total weight (%)')
    ax.set_title(f'Top {len(shown)} ticket holders', fontsize=16, fontweight='bold')
    ax.tick_params(axis='x', rotation=60)
    ax.grid(axis='y', alpha=0.3)
    return _save(fig, path)


def plot_draw_histogram(draws: Sequence[int], path: PathLike, bins: int = 50) -> Path:
    """Histogram: how the draw numbers spread over their domain"""
    _style()
    fig, ax = plt.subplots(figsize=(10, 6))

    values = np.asarray(draws, dtype=np.float64)
    ax.hist(values, bins=bins, color=COLORS['primary'], edgecolor='white', alpha=0.8)
    if values.size:
        ax.axvline(np.median(values), color=COLORS['secondary'], linestyle='--', linewidth=2,
                   label=f'Median: {np.median(values):,.0f}')
        ax.legend()

    ax.set_xlabel('Draw number')
    ax.set_ylabel('Frequency')
    ax.set_title(f'{values.size} draw numbers', fontsize=16, fontweight='bold')
    ax.grid(axis='y', alpha=0.3)
    return _save(fig, path)


def split_draw(draws: Sequence[int]) -> List[np.ndarray]:
    """Recover (x, y, z) coordinates from draw numbers inside the sampling cube.

    Draws outside [0, 999999999] (hypercube, pi) have no point and are skipped.
    """
    values = np.asarray([d for d in draws if 0 <= d <= MAX_POINT], dtype=np.int64)
    return [values % 1000, (values // 1000) % 1000, values // 1_000_000]


def plot_geometric_samples(draws: Sequence[int], path: PathLike) -> Path:
    """3-D scatter of geometric draw numbers inside the sampling cube"""
    _style()
    fig = plt.figure(figsize=(9, 9))
    ax = fig.add_subplot(projection='3d')

    x, y, z = split_draw(draws)
    ax.scatter(x, y, z, s=2, c=z, cmap='viridis', alpha=0.7)
    ax.set_xlim(0, 999)
    ax.set_ylim(0, 999)
    ax.set_zlim(0, 999)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_zlabel('z')
    ax.set_title('Sampled points', fontsize=16, fontweight='bold')
    return _save(fig, path)
