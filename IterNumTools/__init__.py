# IterNumTools.py

from .space import *
from .linspace import *
from .arange import *
from .logspace import *
from .grid import *
from .gridSpace import *
from .arangeGrid import *
from .step import *
from .gridStep import *
from .accum import *
from .lerp import *

# run logging and HDF5/pdf output are only reached through `sweep`
from . import logging as sweeplog
from .logging import log_params

import os
import uuid
import traceback
from datetime import datetime

import numpy as np

def sweep(func, space, *,
          save=False,
          plot=None,
          savedir=None,
          unid=None,
          name=None,
          params=None):
    """
    Evaluates `func` at every point of `space`.

    Points of grid spaces are tuples and are passed to `func` as separate
    arguments, so `func(x, y)` for a two dimensional grid.

    Args:
        func: The function to evaluate.
        space (Space): The points to evaluate it at. Consumed by the sweep.
        save (bool): Whether to save the points and values to HDF5.
        plot (bool): Whether to generate and save a plot. Defaults to `save`.
        savedir (str): Directory to save results. Defaults to '~/IterNumTools/'.
        unid (str): Unique ID for the run. Auto-generated if not provided.
        name (str): A name for the sweep for the log file.
        params (list): List of [name, value] pairs to log, see `log_params`.

    Returns:
        A tuple of (points, values) numpy arrays, or (None, None) if `func` failed.
    """
    if not isinstance(space, Space):
        raise TypeError(f"space must be a Space, not {type(space).__name__}")
    if plot is None:
        plot = save
    if savedir is None:
        savedir = os.path.join(os.path.expanduser("~"), "IterNumTools/")
    if unid is None:
        unid = uuid.uuid4().hex[:5]
    if params is None:
        params = []

    func_name = getattr(func, "__name__", repr(func))
    if save or plot:
        os.makedirs(savedir, exist_ok=True)
        sweeplog.open_log(func_name, space, savedir, unid, name, params)

    param_dict = dict(params)
    param_dict.update({
        "function": func_name,
        "unid": unid,
        "name": name,
    })
    if space.bounds is not None:
        param_dict.update({
            "start": space.bounds.start,
            "end": space.bounds.end,
            "inclusive": space.bounds.inclusive,
        })

    error_file = f"{unid}.e"

    t_start = datetime.now()
    points, values = (None, None)

    try:
        pts, vals = [], []
        for point in space:
            vals.append(func(*point) if isinstance(point, tuple) else func(point))
            pts.append(point)
        points, values = np.asarray(pts), np.asarray(vals)
        if save:
            sweeplog.save_data(savedir, unid, points, values, param_dict)
        if plot:
            sweeplog.save_plot(savedir, unid, points, values, name)
        return points, values

    except Exception:
        traceback.print_exc()
        if save or plot:
            sweeplog.error_log(savedir, unid)
            error_path = os.path.join(savedir, unid, error_file)
            with open(error_path, "w+") as f:
                traceback.print_exc(file=f)
        return None, None
    finally:
        t_elapsed = datetime.now() - t_start
        if save or plot:
            run_dir = os.path.join(savedir, unid)
            output_files = [f for f in os.listdir(run_dir) if f not in [error_file, "info.txt"]]
            sweeplog.close_log(savedir, unid, len(output_files) > 0, t_elapsed)
            print(f"total sweep time : {t_elapsed}")
