"""
Regenerate data/example_grid.csv: a full-factorial grid over the thermal
parameters with the surface temperature and thermal resistances precomputed.
"""
import itertools
from pathlib import Path

import numpy as np
import pandas as pd

h_values = [10.0, 30.0, 50.0]
k_values = [5.0, 50.0]
area_values = [0.1]
thickness_values = [0.001, 0.01]
tinf_values = [25.0, 50.0]
q_values = np.arange(0, 101, 10)

rows = []
for h, k, area, thickness, tinf, q in itertools.product(
    h_values, k_values, area_values, thickness_values, tinf_values, q_values
):
    r_conv = 1.0 / (h * area)
    r_cond = thickness / (k * area)
    r_total = r_conv + r_cond
    rows.append(
        {
            "h_Wm2K": h,
            "k_WmK": k,
            "Area_m2": area,
            "L_m": thickness,
            "Tinf_C": tinf,
            "q_W": int(q),
            "Rconv_KW": r_conv,
            "Rcond_KW": r_cond,
            "Rtotal_KW": r_total,
            "Ts_C": tinf + q * r_total,
        }
    )

df = pd.DataFrame(rows)

Path("data").mkdir(exist_ok=True)
df.to_csv("data/example_grid.csv", index=False, float_format="%.6g")
print("wrote data/example_grid.csv", df.shape)
