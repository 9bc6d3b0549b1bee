import json

from todo_api.generate_openapi import build_openapi, generate_openapi


def test_build_openapi_includes_tags(app):
    schema = build_openapi(app)
    names = [t["name"] for t in schema["tags"]]
    assert "todos" in names and "health" in names
    assert "/todos/{todo_id}" in schema["paths"]


def test_generate_openapi_writes_file(app, tmp_path):
    out = tmp_path / "interfaces" / "openapi.json"
    written = generate_openapi(str(out), app=app)
    assert written == str(out)
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["info"]["title"] == "Todo List API"
    assert set(data["paths"]["/todos"]) == {"get", "post"}
    # Create responses document the 400 error body.
    post_400 = data["paths"]["/todos"]["post"]["responses"]["400"]
    assert post_400["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorOut")
