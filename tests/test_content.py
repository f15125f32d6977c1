from eskwela_admin.models.entities import FileHandle
from eskwela_admin.models.enums import ContentType, Subject

MB = 1024 * 1024


def content_payload(file_name="castle.glb", size=2 * MB, **overrides):
    payload = {
        "title": "Fort Santiago",
        "description": "Walls and gates of the old fort",
        "subject": "History",
        "gradeLevel": "Grade 5",
        "type": "3d_model",
        "file": FileHandle(name=file_name, size=size, type="model/gltf-binary"),
    }
    payload.update(overrides)
    return payload


async def test_list_defaults_to_twelve_per_page(api):
    result = await api.get_content()
    assert len(result.data) == 12
    assert result.pagination.per_page == 12
    assert result.pagination.total == 50


async def test_list_filters_by_subject_and_type(api):
    result = await api.get_content({"subject": "Science", "type": "audio", "per_page": 50})
    assert result.data
    assert all(c.subject == Subject.SCIENCE and c.type == ContentType.AUDIO for c in result.data)


async def test_create_content(api):
    result = await api.create_content(content_payload())
    assert result.success
    assert result.message == "Content created successfully"
    item = result.data
    assert item.id == 51
    assert item.qr_code == "ESK_HIST_051"
    assert item.file_name == "castle.glb"
    assert item.file_url == "/content/castle.glb"
    assert item.file_size == "2.0MB"
    assert item.thumbnail == "/thumbnails/3d_model_51.jpg"


async def test_create_content_rejects_wrong_extension(api):
    result = await api.create_content(content_payload(file_name="model.txt"))
    assert not result.success
    assert result.error_code == "VALIDATION_ERROR"
    assert ".gltf or .glb" in result.message
    assert result.message == "Invalid file type. Expected .gltf or .glb for 3d_model"
    assert (await api.get_content_by_id(51)).message == "Content not found"


async def test_extension_check_ignores_case(api):
    result = await api.create_content(content_payload(file_name="SCENE.GLTF"))
    assert result.success

    audio = await api.create_content(content_payload(file_name="anthem.mp3", type="audio"))
    assert audio.success

    wrong = await api.create_content(content_payload(file_name="anthem.glb", type="audio"))
    assert wrong.message == "Invalid file type. Expected .mp3 or .wav for audio"


async def test_update_content_revalidates_type_change(api):
    created = (await api.create_content(content_payload())).data

    result = await api.update_content(created.id, {"type": "audio"})
    assert not result.success
    assert result.message == "Invalid file type. Expected .mp3 or .wav for audio"

    result = await api.update_content(created.id, {
        "type": "audio", "file": FileHandle(name="narration.wav", size=MB),
    })
    assert result.success
    assert result.data.file_name == "narration.wav"
    assert result.data.file_size == "1.0MB"
    assert result.data.updated_at >= created.updated_at


async def test_update_content_subject_refreshes_qr_code(api):
    created = (await api.create_content(content_payload())).data
    result = await api.update_content(created.id, {"subject": "Science", "title": "Fort Lab"})
    assert result.data.qr_code == f"ESK_SCIE_{created.id:03d}"
    assert result.data.title == "Fort Lab"
    assert result.data.description == created.description


async def test_update_and_delete_missing_content(api):
    assert (await api.update_content(404, {"title": "x"})).message == "Content not found"
    assert (await api.delete_content(404)).message == "Content not found"


async def test_delete_content_twice(api):
    assert (await api.delete_content(3)).success
    assert (await api.delete_content(3)).message == "Content not found"


async def test_upload_reports_progress(api):
    progress = []
    result = await api.upload_file(
        FileHandle(name="lesson.mp3", size=3 * MB, type="audio/mpeg"), progress.append
    )
    assert progress == [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    assert result.success
    assert result.message == "File uploaded successfully"
    assert result.data.url == "/uploads/lesson.mp3"
    assert result.data.file_size == 3 * MB


async def test_upload_without_progress(api):
    result = await api.upload_file({"name": "scene.glb", "size": 10})
    assert result.success
    assert result.data.file_type == "application/octet-stream"


async def test_generate_qr_code(api):
    item = (await api.get_content_by_id(4)).data
    result = await api.generate_qr_code(4)
    assert result.success
    assert result.data.code == item.qr_code
    assert result.data.image_url == f"/qr-codes/{item.qr_code}.png"

    assert (await api.generate_qr_code(999)).message == "Content not found"


async def test_update_content_rejects_null_required_fields(api, store):
    created = (await api.create_content(content_payload())).data
    result = await api.update_content(created.id, {"title": None, "subject": None})
    assert not result.success
    assert result.error_code == "VALIDATION_ERROR"
    assert store.content.get(created.id) == created
