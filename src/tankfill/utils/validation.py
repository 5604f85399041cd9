import numpy as np
import pandas as pd
from loguru import logger


def generate_validation_report(results, tank_height, output_excel=None):
    # 1. Load the simulation timeseries
    df = pd.DataFrame(
        {
            "Time_s": results["time"],
            "Water_Level_m": results["water_level"],
            "Power_W": results["power"],
            "Flowing": results["flowing"],
        }
    )

    # 2. Level must stay inside the tank
    df["Level_In_Bounds"] = (df["Water_Level_m"] >= 0.0) & (df["Water_Level_m"] <= tank_height)

    # 3. Level never drops from one tick to the next
    rise = np.diff(df["Water_Level_m"].to_numpy(), prepend=df["Water_Level_m"].iloc[0] if len(df) else 0.0)
    df["Level_Rise_m"] = rise
    df["Level_Non_Decreasing"] = rise >= 0.0

    # 4. Human-readable status
    df["Validation_Status"] = np.where(df["Level_In_Bounds"] & df["Level_Non_Decreasing"], "PASS", "FAIL")

    failures = int((df["Validation_Status"] == "FAIL").sum())
    if failures:
        logger.warning(f"Validation report found {failures} failing step(s)")

    # 5. Export to Excel
    if output_excel is not None:
        df.to_excel(output_excel, index=False)
        logger.info(f"Validation report ready: {output_excel}")
    return df
