"""Tests for the HTTP API.

The AI bridge is replaced by a fake through FastAPI dependency overrides,
so no network access or API key is needed.

Run with:
    python -m pytest tests/test_api.py -v
"""

import copy

import pytest
from fastapi.testclient import TestClient

from cosine_lab.ai import GeneratedVectors, VectorBridge
from cosine_lab.server.config import get_settings
from cosine_lab.server.dependencies import get_vector_bridge
from cosine_lab.server.main import app
from cosine_lab.utils.config import DEFAULTS, Config


# ============== Mock Classes ==============

class FakeBridge(VectorBridge):
    """Bridge returning canned answers and recording requests."""

    def __init__(self, generated=None, explanation="Nearly the same direction.", available=True):
        self.generated = generated
        self.explanation = explanation
        self._available = available
        self.model_name = "fake-model" if available else None
        self.requests = []

    def generate_vectors(self, concept_a, concept_b, dimensions=5):
        self.requests.append(("generate", concept_a, concept_b, dimensions))
        return self.generated

    def explain(self, vec_a, vec_b, similarity):
        self.requests.append(("explain", list(vec_a), list(vec_b), similarity))
        return self.explanation

    @property
    def available(self):
        return self._available


# ============== Fixtures ==============

@pytest.fixture
def bridge():
    return FakeBridge(
        generated=GeneratedVectors(
            vector_a=[0.5, -0.25],
            vector_b=[1.0, 0.0],
            topic_a="King",
            topic_b="Queen",
            reasoning="Both are royalty.",
        )
    )


@pytest.fixture
def client(bridge):
    """Test client with the fake bridge and default settings."""
    app.dependency_overrides[get_vector_bridge] = lambda: bridge
    app.dependency_overrides[get_settings] = lambda: Config(copy.deepcopy(DEFAULTS))
    yield TestClient(app)
    app.dependency_overrides.clear()


# ============== Tests ==============

class TestHealth:

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["ai_available"] is True
        assert data["model"] == "fake-model"
        assert data["allowed_dimensions"] == [2, 3, 5]

    def test_health_without_ai(self, client):
        app.dependency_overrides[get_vector_bridge] = lambda: FakeBridge(available=False)

        data = client.get("/api/health").json()

        assert data["ai_available"] is False
        assert data["model"] is None


class TestVectorEndpoints:
    """Tests for parsing, comparison and presets."""

    def test_parse(self, client):
        data = client.post("/api/parse", json={"text": "a, 2, b"}).json()
        assert data == {"values": [2.0], "dimensions": 1}

    def test_format(self, client):
        data = client.post("/api/format", json={"value": "1 2 "}).json()
        assert data["value"] == "1, 2, "

    def test_compare(self, client):
        response = client.post("/api/compare", json={"input_a": "3, 0", "input_b": "0, 4"})

        assert response.status_code == 200
        data = response.json()
        assert data["error"] is None
        assert data["result"]["dot_product"] == pytest.approx(0.0)
        assert data["result"]["magnitude_a"] == pytest.approx(3.0)
        assert data["result"]["magnitude_b"] == pytest.approx(4.0)
        assert data["result"]["angle_degrees"] == pytest.approx(90.0)
        assert data["result"]["dimensions"] == 2
        assert data["label"] == "Opposite / Unrelated"
        assert data["formula_steps"]

    def test_compare_mismatch_is_not_an_http_error(self, client):
        response = client.post("/api/compare", json={"input_a": "1, 2", "input_b": "1, 2, 3"})

        assert response.status_code == 200
        data = response.json()
        assert data["result"] is None
        assert data["error"] == "Dimension mismatch: Vector A has 2 dims, Vector B has 3 dims."
        assert data["vector_b"] == [1.0, 2.0, 3.0]

    def test_compare_empty(self, client):
        data = client.post("/api/compare", json={"input_a": "", "input_b": ""}).json()
        assert data["error"] == "Vectors cannot be empty."

    def test_compare_huge_components(self, client):
        data = client.post("/api/compare", json={"input_a": "1e200, 1", "input_b": "1e200, 1"}).json()

        assert data["error"] is None
        assert data["result"]["cosine_similarity"] == pytest.approx(1.0)
        assert data["result"]["dot_product"] is None

    def test_random(self, client):
        data = client.get("/api/random").json()

        a = client.post("/api/parse", json={"text": data["input_a"]}).json()
        b = client.post("/api/parse", json={"text": data["input_b"]}).json()
        assert a["dimensions"] == b["dimensions"]
        assert a["dimensions"] in (2, 3)

    def test_presets(self, client):
        data = client.get("/api/presets").json()

        assert data["default"] == {"input_a": "2, 1", "input_b": "1, 3"}
        assert data["orthogonal"] == {"input_a": "3, 0", "input_b": "0, 4"}
        assert data["rotation"] == {"pitch": -20.0, "yaw": 45.0}


class TestSceneEndpoints:
    """Tests for chart scenes and rotation."""

    def test_2d_scene(self, client):
        data = client.post("/api/scene", json={"vector_a": [3, 0], "vector_b": [0, 4]}).json()

        scene = data["scene"]
        assert scene["mode"] == "2d"
        assert scene["size"] == 300
        assert scene["origin"]["x"] == pytest.approx(150.0)
        assert scene["end_b"]["y"] < scene["origin"]["y"]

    def test_3d_scene(self, client):
        payload = {"vector_a": [1, 2, 3], "vector_b": [3, 2, 1], "pitch": 0, "yaw": 0}
        scene = client.post("/api/scene", json=payload).json()["scene"]

        assert scene["mode"] == "3d"
        assert set(scene["axes"]) == {"x", "y", "z"}
        assert scene["rotation"] == {"pitch": 0.0, "yaw": 0.0}
        assert scene["end_a"]["x"] == pytest.approx(160 + 16.0)

    def test_component_scene(self, client):
        payload = {
            "vector_a": [1, 2, 3, 4, 5],
            "vector_b": [5, 4, 3, 2, 1],
            "label_a": "King",
            "label_b": "Queen",
        }
        scene = client.post("/api/scene", json=payload).json()["scene"]

        assert scene["mode"] == "components"
        assert scene["chart"] == "radar"
        assert scene["label_a"] == "King"
        assert len(scene["rows"]) == 5

    def test_empty_scene(self, client):
        data = client.post("/api/scene", json={"vector_a": [], "vector_b": []}).json()
        assert data["scene"] is None

    def test_pitch_out_of_range_rejected(self, client):
        payload = {"vector_a": [1, 2, 3], "vector_b": [3, 2, 1], "pitch": 120}
        assert client.post("/api/scene", json=payload).status_code == 422

    def test_rotate(self, client):
        payload = {"pitch": 80, "yaw": 0, "dx": 10, "dy": 100}
        data = client.post("/api/rotate", json=payload).json()

        assert data["pitch"] == 90.0
        assert data["yaw"] == pytest.approx(5.0)


class TestAIEndpoints:
    """Tests for generation and explanation."""

    def test_generate(self, client, bridge):
        payload = {"concept_a": " King ", "concept_b": "Queen", "dimensions": 2}
        response = client.post("/api/generate", json=payload)

        assert response.status_code == 200
        data = response.json()
        assert data["input_a"] == "0.5, -0.25"
        assert data["input_b"] == "1, 0"
        assert data["reasoning"] == "Both are royalty."
        assert bridge.requests[0] == ("generate", "King", "Queen", 2)

    def test_generate_default_dimensions(self, client, bridge):
        client.post("/api/generate", json={"concept_a": "King", "concept_b": "Queen"})
        assert bridge.requests[0][3] == 2

    def test_generate_blank_concept(self, client, bridge):
        response = client.post("/api/generate", json={"concept_a": "King", "concept_b": "  "})

        assert response.status_code == 400
        assert response.json()["detail"] == "Please enter two concepts."
        assert bridge.requests == []

    def test_generate_disallowed_dimensions(self, client):
        payload = {"concept_a": "King", "concept_b": "Queen", "dimensions": 4}
        assert client.post("/api/generate", json=payload).status_code == 422

    def test_generate_failure(self, client):
        app.dependency_overrides[get_vector_bridge] = lambda: FakeBridge(generated=None)

        response = client.post("/api/generate", json={"concept_a": "King", "concept_b": "Queen"})

        assert response.status_code == 502
        assert response.json()["detail"] == (
            "Failed to generate vectors. Check API Key or try again."
        )

    def test_explain(self, client, bridge):
        payload = {"vector_a": [1, 2], "vector_b": [2, 3], "similarity": 0.99}
        data = client.post("/api/explain", json=payload).json()

        assert data["explanation"] == "Nearly the same direction."
        assert bridge.requests[0] == ("explain", [1.0, 2.0], [2.0, 3.0], 0.99)

    def test_explain_similarity_out_of_range(self, client):
        payload = {"vector_a": [1], "vector_b": [1], "similarity": 1.5}
        assert client.post("/api/explain", json=payload).status_code == 422


class TestFrontend:

    def test_index(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "Cosine Lab" in response.text

    def test_format_answer_ignored_after_further_typing(self, client):
        page = client.get("/").text

        assert "if ($(id).value !== sent) return;" in page

    def test_editing_clears_error(self, client):
        page = client.get("/").text
        parse_inputs = page.split("async function parseInputs() {")[1].split("\n}")[0]

        assert "showError(null);" in parse_inputs
