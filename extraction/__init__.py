from .box_expansion import expand, expand_rows
from .importer import import_stock_records, is_placeholder, placeholder_record
from .to_canonical import adapt_row, adapt_rows

__all__ = [
    "adapt_row",
    "adapt_rows",
    "expand",
    "expand_rows",
    "import_stock_records",
    "is_placeholder",
    "placeholder_record",
]
