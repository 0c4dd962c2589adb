"""Data tables API views - thin layer over services."""

from typing import Any

from resolver.container import container
from web.api.errors import parse_args

from .schemas import DataTableItem, SearchDataTablesArgs, SearchDataTablesResponse


def search_data_tables(args: SearchDataTablesArgs | dict[str, Any]) -> SearchDataTablesResponse:
    """Search data tables by id prefix, label and/or dataset."""
    args = parse_args(SearchDataTablesArgs, args)
    data = container.data_tables.search(
        table_id_prefix=args.data_table_id,
        label_query=args.label_query,
        dataset_scope=args.dataset_id,
        limit=args.limit,
    )

    items = [DataTableItem(**t.to_dict()) for t in data]
    return SearchDataTablesResponse(items=items)
