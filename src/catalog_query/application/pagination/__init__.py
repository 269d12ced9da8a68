"""Application pagination – page windows and page metadata."""
from catalog_query.application.pagination.page import PageInfo, ResultPage
from catalog_query.application.pagination.paginator import Paginator

__all__ = ["PageInfo", "Paginator", "ResultPage"]
