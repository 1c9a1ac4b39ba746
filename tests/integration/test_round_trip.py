"""
Round trips across several generations of a scaffolded web view, the way a
code generator re-runs against a project that developers keep editing.
"""
from lxml import etree
import pytest

from selvage.merge import AttributeFingerprintStrategy
from selvage.needle import L
from selvage.test_utils import SpyBus, create_test_app, get_stored_fingerprints

JSPX_V1 = """
<div xmlns:jsp="http://java.sun.com/JSP/Page"
     xmlns:form="urn:jsptagdir:/WEB-INF/tags/form"
     xmlns:field="urn:jsptagdir:/WEB-INF/tags/form/fields"
     xmlns:util="urn:jsptagdir:/WEB-INF/tags/util"
     id="owner_create" version="2.0">
  <form:create id="fc_owner" modelAttribute="owner" path="/owners">
    <field:input field="firstName" id="c_owner_firstName" max="30"/>
    <field:input field="lastName" id="c_owner_lastName" max="30"/>
  </form:create>
  <util:placeholder/>
</div>
"""

JSPX_V2 = """
<div xmlns:jsp="http://java.sun.com/JSP/Page"
     xmlns:form="urn:jsptagdir:/WEB-INF/tags/form"
     xmlns:field="urn:jsptagdir:/WEB-INF/tags/form/fields"
     xmlns:util="urn:jsptagdir:/WEB-INF/tags/util"
     id="owner_create" version="2.0">
  <form:create id="fc_owner" modelAttribute="owner" path="/owners">
    <field:input field="firstName" id="c_owner_firstName" max="40"/>
    <field:input field="lastName" id="c_owner_lastName" max="40"/>
    <field:datetime field="birthDay" id="c_owner_birthDay"/>
  </form:create>
  <util:placeholder/>
</div>
"""

FIELDS_NS = "urn:jsptagdir:/WEB-INF/tags/form/fields"


@pytest.fixture(params=["scan", "hashed"])
def project(workspace_factory, request):
    return (
        workspace_factory.with_config({"identity_index": request.param})
        .with_document("target/generated/create.jspx", JSPX_V1)
        .with_mapping("src/main/webapp/owners/create.jspx", "target/generated/create.jspx")
        .build()
    )


def _by_id(root, key):
    return root.xpath("//*[@id=$key]", key=key)[0]


def _regenerate(project, content):
    (project / "target/generated/create.jspx").write_text(content, encoding="utf-8")


def test_generations_with_hand_edits(project, monkeypatch):
    target = project / "src/main/webapp/owners/create.jspx"
    app = create_test_app(project)

    # Generation 1 creates the view.
    assert app.run_sync().created == [target]
    first_stamps = get_stored_fingerprints(target)

    # A developer tweaks one field and adds markup of their own.
    tree = etree.parse(str(target))
    last_name = _by_id(tree.getroot(), "c_owner_lastName")
    last_name.set("max", "60")
    note = etree.SubElement(tree.getroot(), "p")
    note.text = "Fields marked * are required"
    tree.write(str(target), xml_declaration=True, encoding="utf-8")

    # Generation 2 widens both fields and adds a date picker.
    _regenerate(project, JSPX_V2)
    spy_bus = SpyBus()
    with spy_bus.patch(monkeypatch):
        result = app.run_sync()

    assert result.updated == [target]
    spy_bus.assert_id_called(L.sync.file.protected, level="warning")

    root = etree.parse(str(target)).getroot()
    strategy = AttributeFingerprintStrategy()
    first_name = _by_id(root, "c_owner_firstName")
    assert first_name.get("max") == "40"
    assert first_name.get("z") == strategy.compute(first_name)
    assert first_name.get("z") != first_stamps["c_owner_firstName"]

    assert _by_id(root, "c_owner_lastName").get("max") == "60"

    # The new field is not under the form: the placeholder claims it.
    birthday = _by_id(root, "c_owner_birthDay")
    assert birthday.tag == f"{{{FIELDS_NS}}}datetime"
    assert etree.QName(birthday.getnext()).localname == "placeholder"
    assert root.findtext("p") == "Fields marked * are required"

    # Generation 2 again: nothing to do.
    second = target.read_bytes()
    assert app.run_sync().unchanged == [target]
    assert target.read_bytes() == second
    assert app.run_check() is True


def test_unedited_view_follows_generator_exactly(project):
    target = project / "src/main/webapp/owners/create.jspx"
    app = create_test_app(project)
    app.run_sync()

    _regenerate(project, JSPX_V2)
    app.run_sync()

    root = etree.parse(str(target)).getroot()
    assert [el.get("max") for el in root.iter(f"{{{FIELDS_NS}}}input")] == ["40", "40"]
    stored = get_stored_fingerprints(target)
    assert set(stored) == {
        "owner_create",
        "fc_owner",
        "c_owner_firstName",
        "c_owner_lastName",
        "c_owner_birthDay",
    }
