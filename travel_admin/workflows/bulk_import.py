"""Row-by-row spreadsheet import into a MongoDB collection."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, Optional

from ..clients.mongodb_client import get_database
from ..models import ImportResults, RowValidationError
from ..utils.spreadsheet import Row

logger = logging.getLogger(__name__)

# Spreadsheet row 1 holds the headers
FIRST_DATA_ROW = 2

DocumentBuilder = Callable[[Row, Optional[str]], Dict[str, Any]]


def run_import(
    rows: Iterable[Row],
    build_document: DocumentBuilder,
    collection_name: str,
    user_id: Optional[str],
) -> ImportResults:
    """Build and insert one document per row.

    Rows are independent: a failing row is recorded in the results and the
    loop moves on. Nothing is rolled back.
    """
    collection = get_database()[collection_name]
    results = ImportResults()

    for index, row in enumerate(rows):
        row_number = index + FIRST_DATA_ROW
        try:
            document = build_document(row, user_id)
            collection.insert_one(document)
            results.success += 1
        except RowValidationError as exc:
            results.record_failure(row_number, str(exc))
        except Exception as exc:
            logger.warning("Failed to import row %d into %s: %s", row_number, collection_name, exc)
            results.record_failure(row_number, str(exc) or "Unknown error")

    logger.info(
        "Imported into %s: %d successful, %d failed",
        collection_name, results.success, results.failed,
    )
    return results

__all__ = ["run_import", "DocumentBuilder"]
