"""Services package - service class exports."""

from resolver.services.aggregate.service import AggregateDataService
from resolver.services.data_tables.service import DataTableService
from resolver.services.geography.service import GeographyService

__all__ = [
    "AggregateDataService",
    "DataTableService",
    "GeographyService",
]
