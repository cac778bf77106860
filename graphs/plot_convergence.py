import matplotlib.pyplot as plt
import numpy as np

from poker_equity.engine.convergence import convergence_curve
from poker_equity.helpers.cards import parse_board, parse_hand

# --- CONFIGURATION ---
PLAYER = "As Ah"
OPPONENTS = ["2c 7d"]
BOARD = ""
SAMPLES = 50_000
SEEDS = [42, 7, 1234]
OUT_FILE = "graph_equity_convergence.png"


def plot_convergence():
    player = parse_hand(PLAYER)
    opponents = [parse_hand(o) for o in OPPONENTS]
    board = parse_board(BOARD)

    plt.figure(figsize=(10, 6))
    finals = []
    for seed in SEEDS:
        counts, running = convergence_curve(player, opponents, board, SAMPLES, seed)
        finals.append(running[-1])
        plt.plot(counts, running, linewidth=1, label=f"seed {seed}")

    mean_final = float(np.mean(finals))
    plt.axhline(mean_final, color='red', linestyle='--', linewidth=1.5,
                label=f"mean final {mean_final:.4f}")

    plt.xscale('log')
    plt.ylim(max(0.0, mean_final - 0.1), min(1.0, mean_final + 0.1))
    plt.title(f"Equity Convergence: {PLAYER} vs {', '.join(OPPONENTS)}", fontsize=14, fontweight='bold')
    plt.xlabel('Samples', fontsize=12)
    plt.ylabel('Running Equity', fontsize=12)
    plt.legend()
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    plt.savefig(OUT_FILE, dpi=300)
    print(f"Saved '{OUT_FILE}'")
    plt.show()


if __name__ == "__main__":
    plot_convergence()
