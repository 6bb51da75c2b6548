# tests/services/test_doc_service.py
import pytest
from sqlalchemy.exc import IntegrityError

from doc_catalog.core.exceptions import NotFoundError, ConflictError, InvalidVariantError
from doc_catalog.db.models import Code, Doc
from doc_catalog.schemas.category import CategoryCreate
from doc_catalog.schemas.code import CodeCreate
from doc_catalog.schemas.doc import DocCreate, DocUpdate


def test_create_doc_then_get(doc_service, button_doc, buttons_category):
    """A created doc reads back with its fields and snippets verbatim."""
    doc = doc_service.get_doc(button_doc.id)

    assert doc.ui_name == "Button"
    assert doc.ui_subtitle == "Primary Button"
    assert doc.docs == "# Button\n\nClickable."
    assert doc.category_id == buttons_category.id
    assert doc.parent_id is None
    assert [(code.language, code.code) for code in doc.codes] == [
        ("jsx", "function Button() { return <button /> }"),
        ("tailwind", "<button class=\"px-4 py-2\" />"),
    ]
    assert doc.category.category_name == "Buttons"
    assert doc.category.slug == "buttons"
    assert doc.ui_variants == []


def test_create_doc_returns_codes_and_category(button_doc):
    assert len(button_doc.codes) == 2
    assert all(code.doc_id == button_doc.id for code in button_doc.codes)
    assert button_doc.category.slug == "buttons"


def test_create_doc_generates_unique_slug(doc_service):
    first = doc_service.create_doc(DocCreate(ui_name="Primary Button"))
    second = doc_service.create_doc(DocCreate(ui_name="Primary Button"))

    assert first.unique_slug == "primary-button"
    assert second.unique_slug == "primary-button-2"


def test_create_doc_keeps_explicit_slug(doc_service):
    doc = doc_service.create_doc(DocCreate(ui_name="Button", unique_slug="buttons/primary"))
    assert doc.unique_slug == "buttons/primary"

    found = doc_service.get_doc_by_slug("buttons/primary")
    assert found.id == doc.id


def test_create_doc_with_taken_slug_conflicts(doc_service):
    doc_service.create_doc(DocCreate(ui_name="Button", unique_slug="button"))

    with pytest.raises(ConflictError):
        doc_service.create_doc(DocCreate(ui_name="Other", unique_slug="button"))


def test_create_doc_ignores_non_list_codes(doc_service):
    doc = doc_service.create_doc(DocCreate.model_validate({"uiName": "Card", "codes": "nope"}))
    assert doc.codes == []


def test_create_doc_with_unknown_category(doc_service):
    with pytest.raises(NotFoundError) as exc_info:
        doc_service.create_doc(DocCreate(ui_name="Card", category_id=999))

    assert exc_info.value.message == "Category not found"


def test_create_doc_is_atomic(doc_service, db_session):
    """A snippet failing to insert leaves neither the doc nor any snippet behind."""
    broken = DocCreate.model_construct(
        ui_name="Broken",
        ui_subtitle=None,
        docs=None,
        category_id=None,
        unique_slug=None,
        parent_id=None,
        codes=[
            CodeCreate(language="jsx", code="<ok />"),
            CodeCreate.model_construct(language="css", code=None),
        ],
    )

    with pytest.raises(IntegrityError):
        doc_service.create_doc(broken)

    assert db_session.query(Doc).count() == 0
    assert db_session.query(Code).count() == 0

    # The session is usable again after the rollback
    doc = doc_service.create_doc(DocCreate(ui_name="Broken"))
    assert doc.unique_slug == "broken"


def test_get_doc_not_found(doc_service):
    with pytest.raises(NotFoundError) as exc_info:
        doc_service.get_doc(42)

    assert exc_info.value.message == "Doc not found"
    assert exc_info.value.key == 42


def test_get_doc_by_slug_not_found(doc_service):
    with pytest.raises(NotFoundError):
        doc_service.get_doc_by_slug("missing")


def test_create_variant_scenario(doc_service, button_doc):
    """Category -> doc -> variant: the doc lists exactly that variant."""
    variant = doc_service.create_variant(
        button_doc.id, DocCreate(ui_name="Button Variant", parent_id=None)
    )

    assert variant.parent_id == button_doc.id
    assert variant.unique_slug == "button/button-variant"

    doc = doc_service.get_doc(button_doc.id)
    assert [v.id for v in doc.ui_variants] == [variant.id]
    assert doc.ui_variants[0].codes == []


def test_create_variant_overrides_payload_parent(doc_service, button_doc):
    other = doc_service.create_doc(DocCreate(ui_name="Card"))

    variant = doc_service.create_variant(
        button_doc.id,
        DocCreate(
            ui_name="Ghost Button",
            parent_id=other.id,
            codes=[{"language": "jsx", "code": "<Button ghost />"}],
        ),
    )

    assert variant.parent_id == button_doc.id
    assert [code.code for code in variant.codes] == ["<Button ghost />"]
    assert doc_service.get_doc(other.id).ui_variants == []


def test_create_variant_missing_parent(doc_service, db_session):
    with pytest.raises(NotFoundError) as exc_info:
        doc_service.create_variant(999, DocCreate(ui_name="Orphan"))

    assert exc_info.value.message == "Parent doc not found"
    assert db_session.query(Doc).count() == 0


def test_create_variant_of_variant_rejected(doc_service, button_doc, db_session):
    variant = doc_service.create_variant(button_doc.id, DocCreate(ui_name="Outline"))

    with pytest.raises(InvalidVariantError):
        doc_service.create_variant(variant.id, DocCreate(ui_name="Nested"))

    assert db_session.query(Doc).count() == 2


def test_variant_slug_fits_column_under_long_parent(doc_service):
    parent = doc_service.create_doc(DocCreate(ui_name="Button", unique_slug="b" * 250))

    first = doc_service.create_variant(parent.id, DocCreate(ui_name="Ghost Button"))
    second = doc_service.create_variant(parent.id, DocCreate(ui_name="Ghost Button"))

    assert first.unique_slug.startswith("b" * 200)
    assert len(first.unique_slug) <= 255
    assert len(second.unique_slug) <= 255
    assert second.unique_slug != first.unique_slug
    assert doc_service.get_doc_by_slug(second.unique_slug).parent_id == parent.id


def test_variants_are_not_main_docs(doc_service, button_doc):
    doc_service.create_variant(button_doc.id, DocCreate(ui_name="Outline"))

    docs = doc_service.list_main_docs()

    assert [doc.id for doc in docs] == [button_doc.id]
    assert [v.ui_name for v in docs[0].ui_variants] == ["Outline"]


def test_list_main_docs_ordered_by_id(doc_service):
    ids = [doc_service.create_doc(DocCreate(ui_name=name)).id for name in ("B", "A", "C")]

    assert [doc.id for doc in doc_service.list_main_docs()] == sorted(ids)


def test_update_doc_changes_mutable_fields_only(doc_service, button_doc):
    payload = DocUpdate.model_validate(
        {
            "uiName": "Big Button",
            "docs": "updated",
            "parentId": 77,
            "uniqueSlug": "hijacked",
        }
    )

    updated = doc_service.update_doc(button_doc.id, payload)

    assert updated.ui_name == "Big Button"
    assert updated.docs == "updated"
    assert updated.ui_subtitle == "Primary Button"
    assert updated.parent_id is None
    assert updated.unique_slug == button_doc.unique_slug


def test_update_doc_can_clear_category(doc_service, button_doc):
    updated = doc_service.update_doc(button_doc.id, DocUpdate(category_id=None))
    assert updated.category_id is None


def test_update_doc_not_found(doc_service):
    with pytest.raises(NotFoundError):
        doc_service.update_doc(5, DocUpdate(ui_name="x"))


def test_delete_doc_cascades(doc_service, button_doc, db_session):
    variant = doc_service.create_variant(
        button_doc.id,
        DocCreate(ui_name="Outline", codes=[{"language": "tailwind", "code": "border"}]),
    )

    result = doc_service.delete_doc(button_doc.id)

    assert result.message == "Doc deleted successfully"
    with pytest.raises(NotFoundError):
        doc_service.get_doc(button_doc.id)
    with pytest.raises(NotFoundError):
        doc_service.get_doc(variant.id)
    assert db_session.query(Code).count() == 0
    assert doc_service.list_docs_with_code("tailwind") == []


def test_delete_doc_not_found(doc_service):
    with pytest.raises(NotFoundError):
        doc_service.delete_doc(1)


def test_list_grouped_slugs(doc_service, category_service):
    buttons = category_service.create_category(CategoryCreate(category_name="Buttons"))
    alerts = category_service.create_category(CategoryCreate(category_name="Alerts"))
    button = doc_service.create_doc(DocCreate(ui_name="Button", category_id=buttons.id))
    alert = doc_service.create_doc(DocCreate(ui_name="Alert", category_id=alerts.id))
    divider = doc_service.create_doc(DocCreate(ui_name="Divider"))
    doc_service.create_variant(button.id, DocCreate(ui_name="Outline"))

    groups = doc_service.list_grouped_slugs()

    assert [group.category.category_name for group in groups] == [
        "Alerts",
        "Buttons",
        "Uncategorized",
    ]
    assert sum(len(group.children) for group in groups) == 3
    assert groups[0].children[0].id == alert.id
    assert groups[1].children[0].unique_slug == "button"
    assert groups[2].category.id == "0"
    assert groups[2].children[0].id == divider.id


def test_list_docs_with_code_is_outer_join(doc_service, button_doc):
    plain = doc_service.create_doc(
        DocCreate(ui_name="Alert", codes=[{"language": "css", "code": ".alert {}"}])
    )

    docs = doc_service.list_docs_with_code("tailwind")

    by_id = {doc.id: doc for doc in docs}
    assert set(by_id) == {button_doc.id, plain.id}
    assert [code.language for code in by_id[button_doc.id].codes] == ["tailwind"]
    assert by_id[plain.id].codes == []

    # The full snippet list is intact afterwards
    assert len(doc_service.get_doc(button_doc.id).codes) == 2


def test_list_docs_with_code_filters_category(doc_service, button_doc):
    doc_service.create_doc(DocCreate(ui_name="Divider"))

    docs = doc_service.list_docs_with_code("jsx", category_id=button_doc.category_id)

    assert [doc.id for doc in docs] == [button_doc.id]
    assert [code.language for code in docs[0].codes] == ["jsx"]


def test_list_docs_with_code_default_language(doc_service, button_doc):
    docs = doc_service.list_docs_with_code()
    assert [code.language for code in docs[0].codes] == ["tailwind"]
