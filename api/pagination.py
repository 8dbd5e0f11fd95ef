"""
Pagination with the total count echoed in response headers
"""
from rest_framework.pagination import PageNumberPagination
from core.constants import Pagination


class TotalCountPagination(PageNumberPagination):
    page_size = Pagination.DEFAULT_PAGE_SIZE
    page_query_param = 'page'
    page_size_query_param = 'pageSize'
    max_page_size = Pagination.MAX_PAGE_SIZE

    def get_paginated_response(self, data):
        response = super().get_paginated_response(data)
        response['X-Total-Count'] = str(self.page.paginator.count)
        response['X-Page'] = str(self.page.number)
        response['X-Page-Size'] = str(self.page.paginator.per_page)
        return response
