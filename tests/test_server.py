# tests/test_server.py
import pytest

from matchtrace.dashboard.server import create_app, socketio


@pytest.fixture
def app():
    return create_app({"TESTING": True, "SOCKETIO_ASYNC_MODE": "threading"})


@pytest.fixture
def client(app):
    return app.test_client()


def test_health_and_cors(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json()["status"] == "ok"
    assert resp.headers["Access-Control-Allow-Origin"] == "*"


def test_kmp_execute(client):
    resp = client.post("/api/kmp/execute", json={"text": "AABAACAADAABAABA", "pattern": "AABA"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["algorithm"] == "KMP"
    assert body["data"]["result"]["matches"] == [0, 9, 12]
    assert body["data"]["lpsArray"] == [0, 1, 0, 1]


def test_rabin_karp_execute_defaults(client):
    resp = client.post("/api/rabin-karp/execute", json={"text": "GEEKSFORGEEKS", "pattern": "GEEK"})
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["result"]["matches"] == [0, 8]
    assert data["parameters"]["base"] == 256
    assert data["parameters"]["modulo"] == 101


def test_rabin_karp_execute_custom_parameters(client):
    resp = client.post("/api/rabin-karp/execute",
                       json={"text": "ABCAB", "pattern": "AB", "base": 256, "modulo": 1})
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["result"]["matches"] == [0, 3]
    assert data["result"]["spuriousHits"] == 2
    kinds = [s["type"] for s in data["matching"]["steps"]]
    assert kinds.count("spurious_hit") == 2


@pytest.mark.parametrize("url, body, fragment", [
    ("/api/kmp/execute", {"text": "ABC"}, "Pattern is required"),
    ("/api/kmp/execute", {"text": "", "pattern": "A"}, "Text cannot be empty"),
    ("/api/kmp/execute", {"text": "AB", "pattern": "ABC"}, "cannot exceed"),
    ("/api/rabin-karp/execute", {"text": "ABC", "pattern": "A", "base": 0}, "Base"),
    ("/api/rabin-karp/execute", {"text": "ABC", "pattern": "A", "modulo": "7"}, "Modulo"),
    ("/api/rabin-karp/execute", ["ABC", "A"], "JSON object"),
])
def test_invalid_requests(client, url, body, fragment):
    resp = client.post(url, json=body)
    assert resp.status_code == 400
    err = resp.get_json()
    assert err["error"] == "Invalid input"
    assert fragment in err["message"]


def test_non_json_body(client):
    resp = client.post("/api/kmp/execute", data="text=ABC", content_type="text/plain")
    assert resp.status_code == 400


def test_info_endpoints(client):
    kmp = client.get("/api/kmp/info").get_json()
    assert kmp["properties"]["timeComplexity"]["total"] == "O(n + m)"
    rk = client.get("/api/rabin-karp/info").get_json()
    assert rk["parameters"]["modulo"]["default"] == 101
    assert {"text": "GEEKSFORGEEKS", "pattern": "GEEK"} in rk["examples"]


def test_failure_graph_formats(client):
    dot = client.get("/api/kmp/failure-graph?pattern=ABAB&format=dot")
    assert dot.status_code == 200
    assert b"KMP_FAILURE" in dot.data

    js = client.get("/api/kmp/failure-graph?pattern=ABAB&format=json").get_json()
    assert js["lpsArray"] == [0, 0, 1, 2]

    assert client.get("/api/kmp/failure-graph?pattern=&format=dot").status_code == 400
    assert client.get("/api/kmp/failure-graph?pattern=AB&format=png").status_code == 400


def test_replay_streams_every_step(app):
    sio = socketio.test_client(app)
    sio.emit("replay", {"algorithm": "kmp", "text": "ABABDABACDABABCABAB", "pattern": "ABABCABAB"})
    received = sio.get_received()
    names = [r["name"] for r in received]

    assert names[0] == "replay_start"
    assert names[-1] == "replay_complete"

    start = received[0]["args"][0]
    steps = [r["args"][0] for r in received if r["name"] == "replay_step"]
    assert len(steps) == start["preprocessingSteps"] + start["matchingSteps"]
    assert steps[0]["phase"] == "preprocessing"
    assert steps[0]["step"]["type"] == "lps_init"
    assert steps[-1]["phase"] == "matching"
    assert steps[-1]["step"]["type"] == "search_complete"

    assert received[-1]["args"][0]["matches"] == [10]
    sio.disconnect()


def test_replay_rejects_bad_input(app):
    sio = socketio.test_client(app)
    sio.emit("replay", {"algorithm": "rabin-karp", "text": "AB", "pattern": "ABC"})
    received = sio.get_received()
    assert [r["name"] for r in received] == ["replay_error"]
    assert "cannot exceed" in received[0]["args"][0]["message"]

    sio.emit("replay", {"algorithm": "naive", "text": "AB", "pattern": "A"})
    assert sio.get_received()[0]["name"] == "replay_error"
    sio.disconnect()


@pytest.mark.parametrize("delay", ["nan", "inf", "-inf"])
def test_replay_rejects_non_finite_delay(app, delay):
    sio = socketio.test_client(app)
    sio.emit("replay", {"algorithm": "kmp", "text": "ABAB", "pattern": "AB", "delay": delay})
    received = sio.get_received()
    assert [r["name"] for r in received] == ["replay_error"]
    assert "finite" in received[0]["args"][0]["message"]
    sio.disconnect()
