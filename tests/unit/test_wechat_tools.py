import pytest

from wechat_mcp.tools.wechat_tools import ToolName, simulate


@pytest.mark.unit
def test_upload_echoes_material_and_path():
    result = simulate("wechat_upload_material", {"material_type": "image", "file_path": "/tmp/a.png"})
    assert result.data["material_type"] == "image"
    assert result.data["file_path"] == "/tmp/a.png"
    assert result.data["media_id"].startswith("simulated_media_id_")
    assert result.data["url"] == f"http://simulated.wechat.com/media?id={result.data['media_id']}"
    assert "image" in result.message
    assert "/tmp/a.png" in result.message


@pytest.mark.unit
def test_publish_is_submitted():
    result = simulate(ToolName.PUBLISH_ARTICLE.value, {"title": "Hello"})
    assert result.data["status"] == "submitted"
    assert result.data["publish_id"].startswith("simulated_publish_id_")
    assert result.data["title"] == "Hello"
    assert "Hello" in result.message


@pytest.mark.unit
def test_missing_arguments_are_echoed_as_none():
    result = simulate("wechat_upload_material", {})
    assert result.data["material_type"] is None
    assert result.data["file_path"] is None


@pytest.mark.unit
def test_unhandled_name_falls_back_to_generic():
    result = simulate("wechat_send_message", {"to": "someone"})
    assert result.data == {"message": "Successfully simulated call to wechat_send_message"}
    assert result.message == "Successfully simulated call to wechat_send_message"
