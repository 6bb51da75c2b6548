# tests/test_formatters.py
from types import SimpleNamespace

from doc_catalog.utils.formatters import group_docs_by_category


def _category(category_id, name):
    return SimpleNamespace(id=category_id, category_name=name, slug=name.lower())


def _doc(doc_id, name, category=None):
    return SimpleNamespace(
        id=doc_id,
        ui_name=name,
        unique_slug=name.lower(),
        category_id=category.id if category else None,
        category=category,
    )


def test_groups_keep_first_seen_order():
    alerts = _category(7, "Alerts")
    buttons = _category(3, "Buttons")
    docs = [
        _doc(5, "Alert", alerts),
        _doc(1, "Button", buttons),
        _doc(9, "Toast", alerts),
        _doc(2, "Divider"),
    ]

    groups = group_docs_by_category(docs)

    assert [group.category.id for group in groups] == [7, 3, "0"]
    assert [child.id for child in groups[0].children] == [5, 9]
    assert groups[2].category.category_name == "Uncategorized"
    assert groups[2].children[0].category_id is None


def test_empty_input_yields_no_groups():
    assert group_docs_by_category([]) == []


def test_serialized_group_uses_camel_case():
    groups = group_docs_by_category([_doc(1, "Button", _category(3, "Buttons"))])

    payload = groups[0].model_dump(by_alias=True)

    assert payload == {
        "category": {"categoryName": "Buttons", "slug": "buttons", "id": 3},
        "children": [
            {"id": 1, "uiName": "Button", "uniqueSlug": "button", "categoryId": 3}
        ],
    }
