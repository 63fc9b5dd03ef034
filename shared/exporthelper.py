from typing import List, Dict
from fastapi.responses import StreamingResponse
from io import BytesIO
import pandas as pd

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def export_to_excel(
    data: List[Dict],
    filename: str = "export.xlsx",
    column_map: Dict[str, str] | None = None,
    sheet_name: str = "Data",
) -> StreamingResponse:
    """
    Export a list of dictionaries to an Excel download with friendly headers.

    Args:
        data: List of dictionaries (each dict = row)
        filename: Name of the Excel file
        column_map: Mapping of data keys -> friendly column names, also fixes column order
    """
    df = pd.DataFrame(data)

    if column_map:
        # Keys missing from every row still get an (empty) column
        df = df.reindex(columns=list(column_map.keys()))
        df = df.rename(columns=column_map)

    output = BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)

    output.seek(0)

    headers = {
        "Content-Disposition": f'attachment; filename="{filename}"'
    }

    return StreamingResponse(
        output,
        media_type=XLSX_MEDIA_TYPE,
        headers=headers
    )
