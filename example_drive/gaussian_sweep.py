import os
import numpy as np

from IterNumTools import (
    sweep, SpaceError,
    lin_space, log_space, grid_space, arange_grid,
    log_params
)

def main():
    ########################################################################
    ########################## INPUT PARAMETERS ############################
    ########################################################################

    run_name = "example"

    savedir = os.getcwd()

    sigma = 0.5
    x_range = (-2.0, 2.0)
    y_range = (-1.0, 1.0)
    num_points = 41
    grid_step = 0.1

    # E(x, y) = exp(-(x^2 + y^2) / (2 sigma^2))
    def gaussian(x, y):
        return np.exp(-(x**2 + y**2) / (2 * sigma**2))

    ########################################################################
    ########################################################################

    params = log_params(sigma=sigma, num_points=num_points, grid_step=grid_step)

    # --- 1D cut through the centre ---
    xs = lin_space(*x_range, num_points)
    points, values = sweep(lambda x: gaussian(x, 0.0), xs,
                           save=True, savedir=savedir, name=f"{run_name}_cut", params=params)
    if points is not None:
        print(f"cut: {len(points)} points, peak {values.max():.3f}")

    # --- 2D grid, evenly spaced ---
    grid = grid_space((x_range[0], y_range[0]), (x_range[1], y_range[1]), (num_points, num_points // 2 + 1))
    sweep(gaussian, grid, save=True, savedir=savedir, name=f"{run_name}_grid", params=params)

    # --- 2D grid, fixed step ---
    try:
        stepped = arange_grid((x_range[0], y_range[0]), (x_range[1], y_range[1]), grid_step)
    except SpaceError as e:
        print(f"could not build stepped grid: {e}")
        return
    print(f"stepped grid has {len(stepped)} points")
    sweep(gaussian, stepped, save=True, savedir=savedir, name=f"{run_name}_stepped", params=params)

    # --- widths on a log scale, no output files ---
    widths = log_space(0.01, 10.0, 4)
    _, areas = sweep(lambda s: np.sqrt(2 * np.pi) * s, widths)
    print(f"areas: {areas}")

if __name__ == "__main__":
    main()
