from selvage.needle import L
from selvage.test_utils import SpyBus, WorkspaceFactory, create_test_app

GENERATED = '<page id="show"><form id="form" action="/owners"/></page>'


def make_project(tmp_path):
    return (
        WorkspaceFactory(tmp_path)
        .with_document("build/show.xml", GENERATED)
        .with_mapping("views/show.xml", "build/show.xml")
        .build()
    )


def test_check_reports_missing_target(tmp_path, monkeypatch):
    project_root = make_project(tmp_path)
    app = create_test_app(project_root)
    spy_bus = SpyBus()

    with spy_bus.patch(monkeypatch):
        success = app.run_check()

    assert success is False
    spy_bus.assert_id_called(L.check.file.missing, level="warning")
    spy_bus.assert_id_called(L.check.run.fail, level="error")
    assert not (project_root / "views/show.xml").exists()


def test_check_passes_after_sync(tmp_path, monkeypatch):
    project_root = make_project(tmp_path)
    app = create_test_app(project_root)
    app.run_sync()

    spy_bus = SpyBus()
    with spy_bus.patch(monkeypatch):
        success = app.run_check()

    assert success is True
    spy_bus.assert_id_called(L.check.run.success, level="success")


def test_check_detects_pending_generator_changes(tmp_path, monkeypatch):
    project_root = make_project(tmp_path)
    app = create_test_app(project_root)
    app.run_sync()
    (project_root / "build/show.xml").write_text(
        '<page id="show"><form id="form" action="/owners/new"/></page>',
        encoding="utf-8",
    )
    before = (project_root / "views/show.xml").read_text(encoding="utf-8")

    spy_bus = SpyBus()
    with spy_bus.patch(monkeypatch):
        result = app.check()

    assert result.outdated == [project_root / "views/show.xml"]
    spy_bus.assert_id_called(L.check.file.outdated, level="warning")
    assert (project_root / "views/show.xml").read_text(encoding="utf-8") == before
