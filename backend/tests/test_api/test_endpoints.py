"""Tests for API endpoints."""

from __future__ import annotations

import io
import math

from fastapi.testclient import TestClient
from PIL import Image

from tests.conftest import SAMPLE_CSV, TRANSPARENT_SVG

from chordview.main import app


client = TestClient(app)

ORG_PAYLOAD = [
    {"source": "A1 Intake", "target": "2 Finance", "value": 5},
    {"source": "A. Policy", "target": "2 Finance", "value": 2},
    {"source": "B1 Audit", "target": "A1 Intake", "value": 1},
]


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_parse_csv():
    response = client.post("/api/relationships/parse", json={"csv": SAMPLE_CSV})
    assert response.status_code == 200
    rels = response.json()["relationships"]
    assert len(rels) == 7
    assert rels[2] == {"source": "B1", "target": "A1", "value": 5.0}


def test_parse_csv_error_reports_line():
    response = client.post("/api/relationships/parse", json={"csv": "A,B,1\nA,B,x"})
    assert response.status_code == 400
    assert response.json()["detail"]["line"] == 2


def test_diagram():
    response = client.post("/api/diagram", json={"relationships": ORG_PAYLOAD})
    assert response.status_code == 200
    data = response.json()
    assert data["empty"] is False
    assert [e["label"] for e in data["entities"]] == ["2 Finance", "A. Policy", "A1 Intake", "B1 Audit"]
    assert [e["category"] for e in data["entities"]] == ["Container", "ProcessArea", "Process", "Process"]
    assert len(data["arcs"]) == 4
    assert len(data["ribbons"]) == 3
    spans = sum(a["end_angle"] - a["start_angle"] for a in data["arcs"])
    assert math.isclose(spans + 4 * data["pad_angle"], 2 * math.pi, rel_tol=1e-9)
    assert data["svg"].startswith("<svg")


def test_diagram_view_state():
    response = client.post(
        "/api/diagram",
        json={
            "relationships": ORG_PAYLOAD,
            "view": {"width": 500, "height": 500, "surface_id": "chord", "palette": ["#010101"] * 4},
        },
    )
    data = response.json()
    assert 'id="chord"' in data["svg"]
    assert 'viewBox="0 0 540 580"' in data["svg"]
    assert {e["color"] for e in data["entities"]} == {"#010101"}


def test_diagram_empty():
    response = client.post("/api/diagram", json={"relationships": []})
    assert response.status_code == 200
    data = response.json()
    assert data["empty"] is True
    assert data["arcs"] == []
    assert data["ribbons"] == []


def test_diagram_rejects_empty_label():
    response = client.post("/api/diagram", json={"relationships": [{"source": "", "target": "B", "value": 1}]})
    assert response.status_code == 422


def test_interaction_round_trip():
    ribbon = {"source": "A1 Intake", "target": "2 Finance", "value": 5}
    entered = client.post(
        "/api/interaction",
        json={"event": {"kind": "enter", "x": 50, "y": 80, "ribbon": ribbon}},
    ).json()
    assert entered["state"]["phase"] == "hover"
    assert entered["tooltip"]["visible"] is True
    assert entered["tooltip"]["lines"] == ["A1 Intake → 2 Finance", "Value: 5"]

    left = client.post(
        "/api/interaction",
        json={"state": entered["state"], "event": {"kind": "leave", "ribbon": ribbon}},
    ).json()
    assert left["state"]["phase"] == "idle"
    assert left["tooltip"]["visible"] is False


def test_export_png():
    response = client.post(
        "/api/export",
        json={"svg": TRANSPARENT_SVG, "filename": "chord", "device_pixel_ratio": 2},
    )
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert 'filename="chord.png"' in response.headers["content-disposition"]
    img = Image.open(io.BytesIO(response.content))
    assert img.size == (1800, 1200)


def test_export_failure_is_422():
    response = client.post("/api/export", json={"svg": "<svg viewBox='0 0 1 1'><g", "filename": "x.png"})
    assert response.status_code == 422
