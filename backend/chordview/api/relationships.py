"""POST /api/relationships/parse — CSV text → relationship list."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from chordview.ingest.csv_io import RelationshipFormatError, parse_relationships
from chordview.models.requests import ParseCsvRequest
from chordview.models.responses import ParseCsvResponse, RelationshipOut

router = APIRouter(prefix="/relationships")


@router.post("/parse", response_model=ParseCsvResponse)
async def parse_csv(req: ParseCsvRequest) -> ParseCsvResponse:
    try:
        parsed = parse_relationships(req.csv)
    except RelationshipFormatError as e:
        raise HTTPException(status_code=400, detail={"line": e.line_no, "message": str(e)}) from e

    return ParseCsvResponse(
        relationships=[RelationshipOut(source=r.source, target=r.target, value=r.value) for r in parsed]
    )
