"""
Plotting functions for visualizing headless run results.
"""

from typing import Dict, List

import matplotlib.pyplot as plt


TRIAL_COLORS = ['#FF6B6B', '#4ECDC4', '#FFB347', '#95E1D3', '#A29BFE', '#FD79A8']


def plot_survival(trial_results: List[Dict], output_file: str = "prey_survival.png",
                  show: bool = False) -> str:
    """
    Plot live prey count over time for each trial.

    Args:
        trial_results: Results dictionaries from HeadlessRun.run
        output_file: Output filename for the plot
        show: Open an interactive window after saving

    Returns:
        Path to saved plot file
    """
    fig, ax = plt.subplots(figsize=(12, 7))

    for idx, result in enumerate(trial_results):
        series = result["survival_over_time"]
        steps = [d["step"] for d in series]
        alive = [d["alive"] for d in series]
        color = TRIAL_COLORS[idx % len(TRIAL_COLORS)]
        label = f"Trial {result.get('trial', idx + 1)}"

        ax.plot(steps, alive, label=label, linewidth=2, color=color)
        if alive:
            ax.text(steps[-1], alive[-1], f' {alive[-1]}',
                    verticalalignment='center', fontsize=9, color=color)

    ax.set_xlabel('Step', fontsize=12, fontweight='bold')
    ax.set_ylabel('Live Prey', fontsize=12, fontweight='bold')
    ax.set_title('Prey Survival Over Time', fontsize=14, fontweight='bold', pad=20)
    if trial_results:
        ax.legend(fontsize=11, loc='upper right', framealpha=0.9)
    ax.grid(True, alpha=0.3, linestyle='--')

    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nPlot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file


def plot_cohesion(trial_results: List[Dict], output_file: str = "flock_cohesion.png",
                  show: bool = False) -> str:
    """
    Plot flock cohesion (mean distance of live prey to their centroid) over time.

    Args:
        trial_results: Results dictionaries from HeadlessRun.run
        output_file: Output filename for the plot
        show: Open an interactive window after saving

    Returns:
        Path to saved plot file
    """
    fig, ax = plt.subplots(figsize=(12, 7))

    for idx, result in enumerate(trial_results):
        series = result["cohesion_over_time"]
        ax.plot([d["step"] for d in series], [d["cohesion"] for d in series],
                label=f"Trial {result.get('trial', idx + 1)}",
                linewidth=2, alpha=0.8, color=TRIAL_COLORS[idx % len(TRIAL_COLORS)])

    ax.set_xlabel('Step', fontsize=10)
    ax.set_ylabel('Cohesion (avg dist to centroid)', fontsize=10)
    ax.set_title('Flock Cohesion Over Time\n(Lower values = tighter prey grouping)',
                 fontsize=12, fontweight='bold')
    if trial_results:
        ax.legend(fontsize=8, loc='upper right')
    ax.grid(True, alpha=0.3, linestyle='--')

    fig.tight_layout()
    fig.savefig(output_file, dpi=150, bbox_inches='tight')
    print(f"\nCohesion plot saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)
    return output_file
