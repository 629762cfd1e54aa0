import os
import socket
import datetime
import h5py
import numpy as np
import matplotlib.pyplot as plt
from typing import List, Dict, Any, Optional

from .space import Space

def log_params(**kwargs: Any) -> List[List[Any]]:
    """
    Collects sweep parameters as [name, value] pairs, in the order given.

    Example:
        >>> log_params(sigma=0.5, label="gauss")
        [['sigma', 0.5], ['label', 'gauss']]
    """
    return [list(item) for item in kwargs.items()]

def _host_log(savedir: str) -> str:
    return os.path.join(savedir, f"log-{socket.gethostname()}.txt")

def _append_host_log(savedir: str, lines: List[str]):
    with open(_host_log(savedir), "a") as f:
        f.write("\n".join(lines) + "\n\n")

def open_log(
    func_name: str,
    space: Space,
    savedir: str,
    unid: str,
    name: Optional[str],
    params: List[List[Any]],
):
    """
    Sets up logging for a sweep. Creates a directory for the run and writes
    a header to the host log file and to the run's info file.
    """
    run_dir = os.path.join(savedir, unid)
    os.makedirs(run_dir, exist_ok=True)

    lines = [f"[{datetime.datetime.now()}] => SWEEP <{unid}> START"]
    if isinstance(name, str):
        lines.append(f"\t name : {name}")
    lines.append(f"\t function : {func_name}")
    lines.append(f"\t space : {type(space.interpolation).__name__}")
    lines.append(f"\t points = {len(space)}")
    if space.bounds is not None:
        b = space.bounds
        closing = "]" if b.inclusive else ")"
        lines.append(f"\t bounds : [{b.start}, {b.end}{closing}")
    param_str = ", ".join([f"{p[0]} = {p[1]}" for p in params])
    lines.append(f"\t parameters : {param_str}")

    with open(os.path.join(run_dir, "info.txt"), "w") as f0:
        f0.write("\n".join(lines) + "\n")
    _append_host_log(savedir, lines)

def error_log(savedir: str, unid: str):
    """Logs an error message for a sweep."""
    _append_host_log(savedir, [
        f"[{datetime.datetime.now()}] => SWEEP <{unid}> ERROR",
        f"\t see {unid}/{unid}.e for details",
    ])

def close_log(savedir: str, unid: str, output: bool, telapsed: Any):
    """Logs the end of a sweep, including total elapsed time."""
    _append_host_log(savedir, [
        f"[{datetime.datetime.now()}] => SWEEP <{unid}> END",
        "\t output files produced" if output else "\t no output files produced",
        f"\t total run time : {telapsed}",
    ])

def _write_h5_entries(h5_group: h5py.Group, entries: Dict[str, Any]):
    """Writes each entry as a dataset of `h5_group`, storing what h5py rejects as text."""
    for key, value in entries.items():
        value = "None" if value is None else value
        try:
            h5_group.create_dataset(key, data=value)
        except TypeError:
            print(f"Warning: could not save {key} to HDF5, converting to string.")
            h5_group.create_dataset(key, data=str(value))

def save_data(
    savedir: str,
    unid: str,
    points: np.ndarray,
    values: np.ndarray,
    paramdatadict: Dict[str, Any],
) -> str:
    """
    Saves the points and values of a sweep, with its parameters, to an HDF5 file.

    Returns:
        str: The path of the file written.
    """
    filepath = os.path.join(savedir, unid, f"dat_{unid}.h5")
    with h5py.File(filepath, "w") as file:
        g1 = file.create_group("data")
        _write_h5_entries(g1, {"points": points, "values": values})

        g2 = file.create_group("parameters")
        _write_h5_entries(g2, paramdatadict)
    return filepath

def save_plot(
    savedir: str,
    unid: str,
    points: np.ndarray,
    values: np.ndarray,
    title: Optional[str] = None,
) -> Optional[str]:
    """
    Plots the values of a sweep against its points and saves the figure as a pdf.

    One dimensional sweeps are drawn as lines, two dimensional grids as a
    scatter coloured by value. Other sweeps are not plotted.

    Returns:
        The path of the figure, or None if nothing was plotted.
    """
    points = np.asarray(points)
    values = np.asarray(values)
    numeric = np.issubdtype(points.dtype, np.number) and np.issubdtype(values.dtype, np.number)
    if not numeric or values.ndim != 1 or points.ndim not in (1, 2) or (points.ndim == 2 and points.shape[1] != 2):
        print(f"Warning: cannot plot sweep {unid} with points of shape {points.shape} "
              f"and values of shape {values.shape}")
        return None

    plt.rc('figure', figsize=(8, 6))
    fig, ax = plt.subplots()

    if points.ndim == 1:
        if np.iscomplexobj(values):
            ax.plot(points, np.real(values), label="Re")
            ax.plot(points, np.imag(values), label="Im")
            ax.legend()
        else:
            ax.plot(points, values)
        ax.set_xlabel("x")
        ax.set_ylabel("f(x)")
    else:
        sc = ax.scatter(points[:, 0], points[:, 1], c=np.real(values))
        fig.colorbar(sc, ax=ax, label="f(x, y)")
        ax.set_xlabel("x")
        ax.set_ylabel("y")

    ax.set_title(title if title else unid)

    plot_filename = os.path.join(savedir, unid, f"sweep_{unid}.pdf")
    fig.savefig(plot_filename)
    plt.close(fig)
    return plot_filename
