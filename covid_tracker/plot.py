"""Matplotlib chart of a reconstructed timeline."""

import pandas as pd
import matplotlib.pyplot as plt

from .reconstruct import DATE_FORMAT


def timeline_frame(timeline, subjects):
    """DataFrame with one column per subject, indexed by date where the dates parse."""
    frame = pd.DataFrame(
        {s.value: [e.value(s) for e in timeline] for s in subjects},
        index=[e.date for e in timeline],
        dtype="float64",
    )
    dates = pd.to_datetime(pd.Series(frame.index), format=DATE_FORMAT, errors="coerce")
    if len(dates) and not dates.isna().any():
        frame.index = pd.DatetimeIndex(dates)
    return frame


def plot_timeline(timeline, subjects, savepath=None):
    """Plot daily change and its 7-day average for each subject.

    Saves a PNG when `savepath` is given, otherwise opens a window.
    """
    frame = timeline_frame(timeline, subjects)
    daily = frame.diff()
    weekly = daily.rolling(window=7, min_periods=1).mean()

    fig, ax = plt.subplots(figsize=(10, 5))
    for column in frame.columns:
        ax.plot(daily.index, daily[column].values, alpha=0.4, label=f"Daily {column}")
        ax.plot(weekly.index, weekly[column].values, label=f"{column.capitalize()}, 7-day average")
    ax.set_title(f"Daily COVID-19 changes - {timeline.territory}")
    ax.set_xlabel("Date")
    ax.set_ylabel("Change per day")
    ax.legend()
    fig.tight_layout()

    if savepath:
        try:
            fig.savefig(savepath)
        finally:
            plt.close(fig)
        print(f"Saved plot to: {savepath}")
    else:
        plt.show()
