"""Page/limit pagination with a hard cap on the page size."""

import math

from django.conf import settings
from rest_framework.pagination import PageNumberPagination
from rest_framework.response import Response


def _limit(name):
    return settings.PAGINATION[name]


class PagePagination(PageNumberPagination):
    """`?page=<n>&limit=<n>`; limit is clamped to PAGINATION['MAX_LIMIT']."""

    page_query_param = "page"
    page_size_query_param = "limit"

    @property
    def max_page_size(self):
        return _limit("MAX_LIMIT")

    def get_paginated_response(self, data):
        total = self.page.paginator.count
        limit = self.page.paginator.per_page
        return Response({
            "data": data,
            "meta": {
                "page": self.page.number,
                "limit": limit,
                "total": total,
                "total_pages": math.ceil(total / limit) if limit else 0,
                "has_next": self.page.has_next(),
            },
        })


class RecipePagination(PagePagination):
    @property
    def page_size(self):
        return _limit("RECIPES_LIMIT")


class CommentPagination(PagePagination):
    @property
    def page_size(self):
        return _limit("COMMENTS_LIMIT")


class UserPagination(PagePagination):
    @property
    def page_size(self):
        return _limit("USERS_LIMIT")


class IngredientPagination(PagePagination):
    @property
    def page_size(self):
        return _limit("INGREDIENTS_LIMIT")


class ModerationPagination(PagePagination):
    @property
    def page_size(self):
        return _limit("MODERATION_LIMIT")
