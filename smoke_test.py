from __future__ import annotations

from web import create_app


def main() -> None:
    app = create_app()
    client = app.test_client()

    # new game, human plays red
    resp = client.post("/api/new", json={"color": "red", "depth": 2, "seed": 7})
    assert resp.status_code == 200, resp.data
    data = resp.get_json()
    assert "board" in data and "legal_moves" in data

    # make a move and have AI reply
    resp = client.post("/api/move", json={"move": "a7-b6"})
    assert resp.status_code == 200, resp.data
    data = resp.get_json()
    assert "ai_move" in data
    print("Smoke OK. AI replied:", data["ai_move"])


if __name__ == "__main__":
    main()
