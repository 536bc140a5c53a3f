from pathlib import Path

import pandas as pd


def read_df(path: str | Path) -> pd.DataFrame:
    """Load a table of parameter sets (csv, parquet or a JSON list of records)."""
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == ".parquet":
        return pd.read_parquet(p)
    if suffix == ".json":
        return pd.read_json(p, orient="records")
    return pd.read_csv(p)


def write_df(df: pd.DataFrame, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    suffix = p.suffix.lower()
    if suffix == ".parquet":
        df.to_parquet(p, index=False)
    elif suffix == ".json":
        df.to_json(p, orient="records", indent=2)
    else:
        df.to_csv(p, index=False)
    return p
