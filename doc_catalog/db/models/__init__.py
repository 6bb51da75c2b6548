# doc_catalog/db/models/__init__.py
from doc_catalog.db.models.category import Category
from doc_catalog.db.models.doc import Doc
from doc_catalog.db.models.code import Code
