from __future__ import annotations
from .models.file import RecFile
from .playback import iter_inputs


def plot_inputs(file: RecFile):
    """Minimal tick timeline of inputs per player for sanity-checking."""
    import matplotlib.pyplot as plt
    ticks: dict[int, list[int]] = {}
    for ev in iter_inputs(file):
        ticks.setdefault(ev.player_id, []).append(ev.tick)
    plt.figure()
    for player_id, xs in sorted(ticks.items()):
        plt.scatter(xs, [player_id] * len(xs), s=6, label=f"player {player_id}")
    plt.xlabel("Tick")
    plt.ylabel("Player")
    plt.title("REC inputs (sanity plot)")
    plt.legend()
    plt.show()
