# postproc.py
from __future__ import annotations
from pathlib import Path
from typing import Tuple
import numpy as np
import pandas as pd
from flowsheet import Flowsheet

POSSIBLE_ERROR = 0.01

def streams_to_dataframe(fs: Flowsheet) -> pd.DataFrame:
    rows = [{"stream": s.get_name(), "mass_flow": s.get_mass_flow()} for s in fs.streams.values()]
    return pd.DataFrame(rows, columns=["stream", "mass_flow"])

def balance_to_dataframe(fs: Flowsheet, *, tol: float = POSSIBLE_ERROR) -> pd.DataFrame:
    cols = ["device", "kind", "inputs", "outputs", "in_flow", "out_flow", "residual", "conserved"]
    rows = []
    for b in fs.mass_balance():
        rows.append({
            "device":   b.device,
            "kind":     b.kind,
            "inputs":   ",".join(b.inputs),
            "outputs":  ",".join(b.outputs),
            "in_flow":  b.in_flow,
            "out_flow": b.out_flow,
        })
    df = pd.DataFrame(rows, columns=cols[:6])
    df["residual"] = df["out_flow"] - df["in_flow"]
    df["conserved"] = np.isclose(df["out_flow"].to_numpy(dtype=float),
                                 df["in_flow"].to_numpy(dtype=float),
                                 rtol=0.0, atol=tol)
    return df[cols]

def write_results_csvs(fs: Flowsheet, outdir: str | Path, run_id: str) -> Tuple[str, str]:
    """
    Write CSVs:
      - <run_id>_streams.csv : one row per stream.
      - <run_id>_balance.csv : per-device in/out flow and residual.

    Returns:
        (streams_csv_path, balance_csv_path) as strings.
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    streams_path = outdir / f"{run_id}_streams.csv"
    balance_path = outdir / f"{run_id}_balance.csv"

    streams_to_dataframe(fs).to_csv(streams_path, index=False)
    balance_to_dataframe(fs).to_csv(balance_path, index=False)

    return str(streams_path), str(balance_path)
